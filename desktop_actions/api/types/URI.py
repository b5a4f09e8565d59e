from dataclasses import dataclass

from pydantic import AnyUrl, TypeAdapter

_URL_ADAPTER = TypeAdapter(AnyUrl)


@dataclass(frozen=True)
class URI:
    """Strongly typed URI value object.

    Ensures that any instance holds an absolute URL string (scheme required).
    Construction raises pydantic's ValidationError (a ValueError) otherwise.
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError("URI value must be a string")
        _URL_ADAPTER.validate_python(self.value)

    def __str__(self):
        return self.value

    def __repr__(self):
        return f"URI('{self.value}')"

    @property
    def scheme(self) -> str:
        return self.value.split(":", 1)[0].lower()
