"""Where: src/tidyfinder/features/propagation/domain/targets.py
What: Ordered, de-duplicated collection of folders receiving template metadata.
Why: The template itself must never be a target and duplicates must collapse.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path


def _normalize(path: Path | str) -> Path:
    return Path(path).expanduser().resolve()


def _display_key(path: Path) -> tuple[str, str]:
    return (path.name, str(path))


class TargetFolderSet:
    """Target folders kept sorted by folder name for display."""

    def __init__(
        self,
        targets: Iterable[Path | str] = (),
        *,
        template: Path | str | None = None,
    ) -> None:
        self._template: Path | None = _normalize(template) if template is not None else None
        self._targets: list[Path] = []
        _ = self.add(targets)

    @property
    def template(self) -> Path | None:
        return self._template

    @template.setter
    def template(self, value: Path | str | None) -> None:
        self._template = _normalize(value) if value is not None else None
        if self._template is not None:
            _ = self.remove(self._template)

    def add(self, paths: Iterable[Path | str]) -> list[Path]:
        """Add ``paths`` skipping duplicates and the template; return what was added."""

        added: list[Path] = []
        for raw in paths:
            candidate = _normalize(raw)
            if candidate == self._template or candidate in self._targets:
                continue
            self._targets.append(candidate)
            added.append(candidate)
        self._targets.sort(key=_display_key)
        return added

    def remove(self, path: Path | str) -> bool:
        candidate = _normalize(path)
        if candidate not in self._targets:
            return False
        self._targets.remove(candidate)
        return True

    def clear(self) -> None:
        self._targets.clear()

    def as_list(self) -> list[Path]:
        return list(self._targets)

    def __iter__(self) -> Iterator[Path]:
        return iter(list(self._targets))

    def __len__(self) -> int:
        return len(self._targets)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, (str, Path)):
            return False
        return _normalize(item) in self._targets


__all__ = ["TargetFolderSet"]
