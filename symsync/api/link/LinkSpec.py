"""Desired symbolic link: a link named ``target`` pointing at ``source``."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class LinkSpec:
    source: str
    target: str

    def __str__(self) -> str:
        return f"{self.target} -> {self.source}"

    def to_dict(self) -> dict[str, str]:
        return {"source": self.source, "target": self.target}
