from pydantic import BaseModel, ConfigDict


def _snake_to_camel(name: str) -> str:
    components = name.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


class BaseInfo(BaseModel):
    """Frozen descriptor accepting both snake_case names and camelCase aliases."""

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        alias_generator=_snake_to_camel,
        serialize_by_alias=True,
        use_enum_values=True,
    )
