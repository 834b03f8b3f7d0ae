"""Settings schema for fzwalk."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SearchSettings(BaseModel):
    workers: int = Field(default=14, ge=1, le=256, description="Traversal thread pool size")
    top_k: int = Field(default=10, ge=1, le=1000)
    poll_interval_s: float = Field(default=0.05, gt=0, le=5.0)
    respect_ignore: bool = Field(default=False, description="Skip .gitignore'd entries")


class DisplaySettings(BaseModel):
    color: bool = Field(default=True)
    live: bool = Field(default=True, description="Redraw ranked matches while scanning")
    show_elapsed: bool = Field(default=True)


class AppSettings(BaseModel):
    schema_version: int = Field(default=1)
    search: SearchSettings = Field(default_factory=SearchSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    def setting_items(self) -> list[tuple[str, str]]:
        """Flatten key/value pairs, e.g. for ``fzwalk settings show``."""

        result: list[tuple[str, str]] = []

        def walk(prefix: str, value: object) -> None:
            if isinstance(value, dict):
                for key, nested in value.items():
                    walk(f"{prefix}.{key}" if prefix else key, nested)
            else:
                result.append((prefix, str(value)))

        walk("", self.model_dump())
        return result
