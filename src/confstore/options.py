"""Option models for ConfigStore, load and save calls."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from confstore.errors import InvalidArgumentError
from confstore.utils.merge import MergeStrategy

__all__ = ["StoreOptions", "LoadOptions", "SaveOptions", "parse_options"]

_M = TypeVar("_M", bound=BaseModel)


class StoreOptions(BaseModel):
    """Options fixed at construction or reconfiguration time.

    Every field also accepts the camelCase spelling (``onAfterLoad``,
    ``templateVariables`` ...). Unknown options are kept as extras.
    """

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True, extra="allow")

    reader: Any = "file"
    writer: Any = "file"
    separator: str = Field(default=".", min_length=1)
    on_after_load: Any = Field(default=None, alias="onAfterLoad")
    on_before_save: Any = Field(default=None, alias="onBeforeSave")
    template_variables: dict[str, Any] = Field(default_factory=dict, alias="templateVariables")
    default_load_strategy: MergeStrategy = Field(
        default=MergeStrategy.REPLACE_RECURSIVE, alias="defaultLoadStrategy"
    )
    read_only: bool = Field(default=False, alias="readOnly")


class LoadOptions(BaseModel):
    """Per-call options for ``ConfigStore.load``."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    data: Any = None
    file: Any = None
    load_in_key: Any = Field(default=None, alias="loadInKey")
    process_imports: bool = Field(default=False, alias="processImports")
    clear_first: bool = Field(default=False, alias="clearFirst")
    reader_options: dict[str, Any] = Field(default_factory=dict, alias="readerOptions")
    strategy: MergeStrategy | None = None


class SaveOptions(BaseModel):
    """Per-call options for ``ConfigStore.save``."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    file: Any = None
    writer_options: dict[str, Any] = Field(default_factory=dict, alias="writerOptions")


def parse_options(model: type[_M], options: dict[str, Any] | None) -> _M:
    """Validate ``options`` against ``model``, applying its defaults.

    Raises:
        InvalidArgumentError: If pydantic rejects a value.
    """
    try:
        return model.model_validate(options or {})
    except ValidationError as e:
        errors = [
            {
                "field": ".".join(str(loc) for loc in err["loc"]),
                "code": err["type"],
                "message": err["msg"],
            }
            for err in e.errors()
        ]
        fields = ", ".join(err["field"] for err in errors)
        raise InvalidArgumentError(
            f"Invalid {model.__name__}: {fields}",
            details={"errors": errors},
            cause=e,
        ) from e
