"""Response envelope returned by every Story Spoiler API call.

The API answers with loosely shaped JSON: an object carrying an optional
`msg` and, for create, a `storyId`; an array for the list call; or nothing
at all for some deletes. The envelope keeps the status, the raw text and
the parsed body, and exposes the two optional fields without assuming they
exist.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class ApiResponse:
    """Status code and body of one API call.

    Attributes:
        status_code: HTTP status code.
        text: Raw response body ("" when empty).
        body: Parsed JSON body, or None when the body is empty or not JSON.
    """

    status_code: int
    text: str = ""
    body: Any = None

    @property
    def has_body(self) -> bool:
        """True when the raw body contains anything besides whitespace."""
        return bool(self.text.strip())

    @property
    def message(self) -> str | None:
        """The `msg` field, if the body is an object carrying a string msg."""
        return self._string_field("msg")

    @property
    def story_id(self) -> str | None:
        """The `storyId` field, if the body is an object carrying one."""
        return self._string_field("storyId")

    @property
    def items(self) -> list[Any] | None:
        """The body when it is a JSON array, else None."""
        return self.body if isinstance(self.body, list) else None

    def has_field(self, name: str) -> bool:
        """Whether the body is an object with the given key."""
        return isinstance(self.body, dict) and name in self.body

    def _string_field(self, name: str) -> str | None:
        if not isinstance(self.body, dict):
            return None
        value = self.body.get(name)
        if value is None:
            return None
        return str(value)
