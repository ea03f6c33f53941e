"""In-process fake of the Story Spoiler API.

Mounted behind `httpx.MockTransport`, it answers the five endpoints the
suite uses with the same statuses and messages as the public deployment,
keeping stories in a dict. Every request is recorded for assertions.
"""

import json
import re
import uuid
from dataclasses import dataclass, field
from typing import Any

import httpx

_EDIT_PATH = re.compile(r"^/api/Story/Edit/(?P<story_id>[^/]+)$")
_DELETE_PATH = re.compile(r"^/api/Story/Delete/(?P<story_id>[^/]+)$")


@dataclass
class FakeStorySpoilerService:
    """Stateful fake with switches for breaking individual endpoints.

    Attributes:
        user_name: Accepted login name.
        password: Accepted password.
        token: Token issued on successful login.
        stories: Stored stories keyed by id.
        requests: Every request received, in order.
        create_status: Override status for successful creates (None = 201).
        issue_token: When False, login succeeds but returns no accessToken.
    """

    user_name: str = "ico1"
    password: str = "ico1ico1"
    token: str = "fake-jwt-token"
    stories: dict[str, dict[str, Any]] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)
    create_status: int | None = None
    issue_token: bool = True

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/api/User/Authentication" and request.method == "POST":
            return self._login(request)

        if request.headers.get("Authorization") != f"Bearer {self.token}":
            return httpx.Response(401)

        if path == "/api/Story/Create" and request.method == "POST":
            return self._create(request)
        if path == "/api/Story/All" and request.method == "GET":
            return httpx.Response(200, json=list(self.stories.values()))
        if (match := _EDIT_PATH.match(path)) and request.method == "PUT":
            return self._edit(match["story_id"], request)
        if (match := _DELETE_PATH.match(path)) and request.method == "DELETE":
            return self._delete(match["story_id"])

        return httpx.Response(404)

    def _login(self, request: httpx.Request) -> httpx.Response:
        body = _json_body(request)
        if body.get("userName") != self.user_name or body.get("password") != self.password:
            return httpx.Response(401, json={"msg": "Invalid username or password!"})
        if not self.issue_token:
            return httpx.Response(200, json={"username": self.user_name})
        return httpx.Response(200, json={"username": self.user_name, "accessToken": self.token})

    def _create(self, request: httpx.Request) -> httpx.Response:
        body = _json_body(request)
        missing = [name for name in ("title", "description") if not body.get(name)]
        if missing:
            return httpx.Response(
                400,
                json={
                    "title": "One or more validation errors occurred.",
                    "errors": {name: [f"The {name} field is required."] for name in missing},
                },
            )
        if self.create_status is not None:
            return httpx.Response(self.create_status, json={"msg": "Something went wrong"})

        story_id = str(uuid.uuid4())
        self.stories[story_id] = {"id": story_id, **body}
        return httpx.Response(201, json={"storyId": story_id, "msg": "Successfully created!"})

    def _edit(self, story_id: str, request: httpx.Request) -> httpx.Response:
        if story_id not in self.stories:
            return httpx.Response(404, json={"msg": "No spoilers..."})
        self.stories[story_id].update(_json_body(request))
        return httpx.Response(200, json={"msg": "Successfully edited"})

    def _delete(self, story_id: str) -> httpx.Response:
        if self.stories.pop(story_id, None) is None:
            return httpx.Response(400, json={"msg": "Unable to delete this story spoiler!"})
        return httpx.Response(200, json={"msg": "Deleted successfully!"})

    def requests_to(self, path_prefix: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.startswith(path_prefix)]


def _json_body(request: httpx.Request) -> dict[str, Any]:
    content = request.read()
    if not content:
        return {}
    data = json.loads(content)
    return data if isinstance(data, dict) else {}
