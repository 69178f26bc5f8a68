import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from alvr_filesystem.errors import ConfigError

ENV_PREFIX = "ALVR_"


class LayoutOverrides(BaseModel):
    root: Optional[str] = Field(
        default=None,
        description="Installation root of a portable build. Input paths are ignored when set",
        examples=["/opt/alvr"],
    )

    executables_dir: Optional[str] = Field(
        default=None,
        description="Directory of the dashboard executable, relative to the root",
    )
    libraries_dir: Optional[str] = Field(
        default=None,
        description="Directory of the vulkan layer library, relative to the root",
    )
    static_resources_dir: Optional[str] = Field(
        default=None,
        description="Parent of the dashboard and presets resources, relative to the root",
    )
    config_dir: Optional[str] = Field(
        default=None,
        description="Directory holding session.json. Not joined to the root",
    )
    log_dir: Optional[str] = Field(
        default=None,
        description="Directory holding the session and crash logs. Not joined to the root",
    )
    openvr_driver_root_dir: Optional[str] = Field(
        default=None,
        description="Directory registered as the openVR driver path, relative to the root",
    )
    vrcompositor_wrapper_dir: Optional[str] = Field(
        default=None,
        description="Parent of the vrcompositor wrapper, relative to the root",
    )
    firewall_script_dir: Optional[str] = Field(
        default=None,
        description="Parent of the firewall script, relative to the root",
    )
    firewalld_config_dir: Optional[str] = Field(
        default=None,
        description="Parent of the firewalld config, relative to the root",
    )
    ufw_config_dir: Optional[str] = Field(
        default=None,
        description="Parent of the ufw config, relative to the root",
    )
    vulkan_layer_manifest_dir: Optional[str] = Field(
        default=None,
        description="Directory of the vulkan layer manifest, relative to the root",
    )

    @field_validator("*", mode="before")
    @classmethod
    def empty_as_unset(cls, value: Optional[str]) -> Optional[str]:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def is_portable(self) -> bool:
        return self.root is not None

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "LayoutOverrides":
        unknown = set(values) - set(cls.model_fields)
        if unknown:
            raise ConfigError(
                "Unknown layout overrides: " + ", ".join(sorted(unknown))
            )

        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigError(f"Invalid layout overrides: {exc}") from exc

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        prefix: str = ENV_PREFIX,
    ) -> "LayoutOverrides":
        if environ is None:
            environ = os.environ

        values = {}
        for name in cls.model_fields:
            value = environ.get(f"{prefix}{name.upper()}")
            if value is not None:
                values[name] = value

        return cls.from_mapping(values)

    class Config:
        frozen = True
        extra = "forbid"
