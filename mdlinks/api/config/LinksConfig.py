"""Link processing configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LinksConfig(BaseModel):
    """Links section of mdlinks configuration.

    Passed explicitly to every link processing call; frozen so a run cannot
    change it halfway through.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    docs_folders: list[str] = Field(
        default_factory=list,
        description="Folder names that mark a link as already rooted at the dataset root",
    )
    dataset_root: str = Field(..., description="Absolute path anchoring dataset-relative resolution")
    exclusion_list: list[str] = Field(
        default_factory=list,
        description="Href prefixes exempt from all rewriting",
    )

    @field_validator("docs_folders")
    @classmethod
    def _dedupe_folders(cls, v: list[str]) -> list[str]:
        """Keep first occurrence order, drop duplicates and empty names."""
        return list(dict.fromkeys(folder for folder in v if folder))

    @field_validator("dataset_root")
    @classmethod
    def _normalize_root(cls, v: str) -> str:
        """Expand ~ and make absolute."""
        from .normalize_path import normalize_path

        if not v:
            raise ValueError("dataset_root must not be empty")
        return str(normalize_path(v))
