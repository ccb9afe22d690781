from __future__ import annotations


class FragmentContext:
    """Names the container element a fragment is parsed inside, e.g. `FragmentContext("tr")`."""

    __slots__ = ("tag_name",)

    tag_name: str

    def __init__(self, tag_name: str = "div") -> None:
        self.tag_name = tag_name

    def __repr__(self) -> str:
        return f"FragmentContext({self.tag_name!r})"
