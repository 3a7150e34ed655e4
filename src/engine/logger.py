"""Logging with per-subsystem channel toggles."""
from __future__ import annotations

import logging
import sys
from typing import Dict, Iterable, Mapping, Optional

DEFAULT_CHANNELS = {
    "camera": False,
    "collision": True,
    "input": True,
    "render": True,
}


class ChannelLogger:
    """Wrapper that only emits records when the channel is enabled."""

    def __init__(self, name: str, logger: logging.Logger, enabled: bool) -> None:
        self._logger = logger
        self._enabled = enabled
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    def debug(self, msg: str, *args, **kwargs) -> None:
        if self._enabled:
            self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        if self._enabled:
            self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        if self._enabled:
            self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        # Errors are never muted.
        self._logger.error(msg, *args, **kwargs)


class EngineLogger:
    """Central registry of channel loggers under the ``cubes`` namespace."""

    def __init__(
        self,
        level: int = logging.INFO,
        channels: Optional[Mapping[str, bool]] = None,
        configure_root: bool = True,
    ) -> None:
        if configure_root:
            logging.basicConfig(
                level=level,
                format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                stream=sys.stdout,
            )
        self._root = logging.getLogger("cubes")
        self._root.setLevel(level)
        merged = DEFAULT_CHANNELS.copy()
        if channels:
            merged.update(channels)
        self._channels: Dict[str, ChannelLogger] = {}
        for name, enabled in merged.items():
            self._channels[name] = ChannelLogger(name, logging.getLogger(f"cubes.{name}"), bool(enabled))

    @property
    def root(self) -> logging.Logger:
        return self._root

    def channel(self, name: str) -> ChannelLogger:
        if name not in self._channels:
            # Unknown channels start disabled until explicitly enabled.
            self._channels[name] = ChannelLogger(name, logging.getLogger(f"cubes.{name}"), False)
        return self._channels[name]

    def set_enabled(self, name: str, enabled: bool) -> None:
        self.channel(name).enabled = enabled

    def channels(self) -> Iterable[str]:
        return self._channels.keys()


def quiet_logger() -> EngineLogger:
    """Logger with every channel muted and no root handler setup."""
    return EngineLogger(
        level=logging.CRITICAL,
        channels={name: False for name in DEFAULT_CHANNELS},
        configure_root=False,
    )


__all__ = ["ChannelLogger", "DEFAULT_CHANNELS", "EngineLogger", "quiet_logger"]
