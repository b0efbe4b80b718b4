"""
Resource methods for users, teams and courses.

Each method is a single call to one of the four verbs provided by the host
class (LitmosClient): a path, some parameters, nothing else.  None of them
touch HTTP directly, and none of them interpret the response beyond what the
transport already does.
"""

from typing import Any, Iterable, Optional


def _require(value: Optional[str], name: str) -> str:
    if value is None or not str(value).strip():
        raise ValueError(f"{name} must not be blank")
    return str(value).strip()


def _id_list(ids: Iterable[str], name: str) -> list[dict[str, str]]:
    items = [{"Id": _require(i, name)} for i in ids]
    if not items:
        raise ValueError(f"at least one {name} is required")
    return items


def _paging(search: Optional[str], limit: Optional[int], start: Optional[int]) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if search:
        params["search"] = search
    if limit is not None:
        params["limit"] = limit
    if start is not None:
        params["start"] = start
    return params


class UsersMixin:
    def list_users(
        self,
        search: Optional[str] = None,
        limit: Optional[int] = None,
        start: Optional[int] = None,
    ) -> Any:
        return self.get("users", _paging(search, limit, start))

    def find_user_by_id(self, user_id: str) -> Any:
        return self.get(f"users/{_require(user_id, 'user_id')}")

    def create_user(self, user: dict[str, Any]) -> Any:
        """POST a user record, e.g. {"UserName": ..., "FirstName": ..., "LastName": ...}."""
        if not user:
            raise ValueError("user must not be empty")
        return self.post("users", user)

    def update_user(self, user_id: str, user: dict[str, Any]) -> Any:
        return self.put(f"users/{_require(user_id, 'user_id')}", user)

    def delete_user(self, user_id: str) -> Any:
        return self.delete(f"users/{_require(user_id, 'user_id')}")


class TeamsMixin:
    def list_teams(
        self,
        search: Optional[str] = None,
        limit: Optional[int] = None,
        start: Optional[int] = None,
    ) -> Any:
        return self.get("teams", _paging(search, limit, start))

    def find_team_by_id(self, team_id: str) -> Any:
        return self.get(f"teams/{_require(team_id, 'team_id')}")

    def get_team_users(self, team_id: str) -> Any:
        return self.get(f"teams/{_require(team_id, 'team_id')}/users")

    def add_users_to_team(self, team_id: str, user_ids: Iterable[str]) -> Any:
        return self.post(
            f"teams/{_require(team_id, 'team_id')}/users",
            _id_list(user_ids, "user_id"),
        )

    def remove_user_from_team(self, team_id: str, user_id: str) -> Any:
        return self.delete(
            f"teams/{_require(team_id, 'team_id')}/users/{_require(user_id, 'user_id')}"
        )


class CoursesMixin:
    def list_courses(
        self,
        search: Optional[str] = None,
        limit: Optional[int] = None,
        start: Optional[int] = None,
    ) -> Any:
        return self.get("courses", _paging(search, limit, start))

    def find_course_by_id(self, course_id: str) -> Any:
        return self.get(f"courses/{_require(course_id, 'course_id')}")

    def get_user_courses(self, user_id: str) -> Any:
        return self.get(f"users/{_require(user_id, 'user_id')}/courses")

    def assign_courses_to_user(
        self,
        user_id: str,
        course_ids: Iterable[str],
        send_message: bool = True,
    ) -> Any:
        """Assign courses; Litmos emails the user unless send_message is False."""
        return self.post(
            f"users/{_require(user_id, 'user_id')}/courses",
            _id_list(course_ids, "course_id"),
            {"sendmessage": "true" if send_message else "false"},
        )
