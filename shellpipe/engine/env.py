from __future__ import annotations

from abc import ABC, abstractmethod
import os
import re
from typing import Dict, List, Mapping

from .status import EmptyKeyError

_VARIABLE = re.compile(r"\$(?:\{([^}]*)\}|([*#$@!?\-0-9])|([A-Za-z0-9_]+))")


class Expander(ABC):
    """Key/value store that can expand ``$VAR`` and ``${VAR}`` references."""

    @abstractmethod
    def lookup(self, key: str) -> str | None:
        """Return the value for ``key``, or ``None`` when it is not set."""

    @abstractmethod
    def setenv(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def unsetenv(self, key: str) -> None:
        ...

    @abstractmethod
    def environ(self) -> List[str]:
        """Return every entry as a ``key=value`` string."""

    def getenv(self, key: str) -> str:
        value = self.lookup(key)
        return value if value is not None else ""

    def expand(self, text: str) -> str:
        return _VARIABLE.sub(self._substitute, text)

    def _substitute(self, match: re.Match[str]) -> str:
        name = next((group for group in match.groups() if group is not None), "")
        if not name:
            return ""
        return self.getenv(name)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None

    def __len__(self) -> int:
        return len(self.environ())


class ProgramEnv(Expander):
    """Reads and writes the process environment."""

    def lookup(self, key: str) -> str | None:
        return os.environ.get(key)

    def setenv(self, key: str, value: str) -> None:
        _check_key(key)
        os.environ[key] = value

    def unsetenv(self, key: str) -> None:
        os.environ.pop(key, None)

    def environ(self) -> List[str]:
        return [f"{key}={value}" for key, value in os.environ.items()]


class LocalEnv(Expander):
    """Isolated store; changes never reach the process environment."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: Dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.setenv(key, value)

    def lookup(self, key: str) -> str | None:
        return self._values.get(key)

    def setenv(self, key: str, value: str) -> None:
        _check_key(key)
        self._values[key] = value

    def unsetenv(self, key: str) -> None:
        self._values.pop(key, None)

    def clearenv(self) -> None:
        self._values.clear()

    def environ(self) -> List[str]:
        return [f"{key}={value}" for key, value in self._values.items()]


class OverlayEnv(Expander):
    """Chains several stores. Lookups use the first store that has the key."""

    def __init__(self, *envs: Expander) -> None:
        if not envs:
            raise ValueError("OverlayEnv requires at least one environment.")
        self.envs = list(envs)

    def lookup(self, key: str) -> str | None:
        for env in self.envs:
            value = env.lookup(key)
            if value is not None:
                return value
        return None

    def setenv(self, key: str, value: str) -> None:
        self.envs[0].setenv(key, value)

    def unsetenv(self, key: str) -> None:
        self.envs[0].unsetenv(key)

    def environ(self) -> List[str]:
        seen: set[str] = set()
        pairs: List[str] = []
        for env in self.envs:
            for pair in env.environ():
                key = pair.split("=", 1)[0]
                if key in seen:
                    continue
                seen.add(key)
                pairs.append(pair)
        return pairs


def _check_key(key: str) -> None:
    if not key or not key.strip():
        raise EmptyKeyError()
