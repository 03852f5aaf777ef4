"""Loaded sounds, looping sound slots and a pool for one-shot effects."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import pygame

from tilerunner.constants import AudioId


def _load_pygame_sound(filename: str) -> Any:
    if not pygame.mixer.get_init():
        pygame.mixer.init()
    return pygame.mixer.Sound(filename)


class _Voice:
    """A playback slot: plays one loaded sound on its own channel."""

    def __init__(self, sound: Any = None) -> None:
        self.sound = sound
        self._channel: Any = None

    def play(self, sound: Any = None, loops: int = 0) -> None:
        if sound is not None:
            self.sound = sound
        if self.sound is not None:
            self._channel = self.sound.play(loops=loops)

    def stop(self) -> None:
        if self._channel is not None:
            self._channel.stop()

    def is_playing(self) -> bool:
        return self._channel is not None and bool(self._channel.get_busy())


class AudioManager:
    """Sounds by id, plus a pool of slots that grows when all are busy."""

    MINIMUM_POOL_SIZE = 25

    def __init__(
        self,
        volumes: Mapping[AudioId, float] | None = None,
        loader: Callable[[str], Any] = _load_pygame_sound,
    ) -> None:
        self._loader = loader
        self._volumes: dict[AudioId, float] = dict(volumes or {})
        self._buffers: dict[AudioId, Any] = {}
        self._sounds: dict[AudioId, _Voice] = {}
        self._pool: list[_Voice] = []

    @property
    def pool_size(self) -> int:
        return len(self._pool)

    def load_sound(self, audio_id: AudioId, filename: str) -> None:
        """Load a sound file and give it its own slot; volume is a percentage."""
        try:
            buffer = self._loader(filename)
        except (pygame.error, OSError) as exc:
            raise OSError(f"Failed to load sound: {filename}") from exc
        buffer.set_volume(self._volumes.get(audio_id, 0.0) / 100.0)
        self._buffers[audio_id] = buffer
        self._sounds[audio_id] = _Voice(buffer)

    def sound(self, audio_id: AudioId) -> _Voice:
        """The slot of a loaded sound; ``KeyError`` if it was never loaded."""
        return self._sounds[audio_id]

    def is_playing(self, audio_id: AudioId) -> bool:
        return self._sounds[audio_id].is_playing()

    def play_sound(self, audio_id: AudioId, loop: bool = False) -> None:
        """Play a loaded sound in its own slot; unknown ids are ignored."""
        voice = self._sounds.get(audio_id)
        if voice is not None:
            voice.play(loops=-1 if loop else 0)

    def play_pooled_sound(self, audio_id: AudioId) -> None:
        """Play a loaded sound in the first idle pool slot, adding one if none is idle."""
        if not self._pool:
            self._pool = [_Voice() for _ in range(self.MINIMUM_POOL_SIZE)]

        buffer = self._buffers[audio_id]
        for voice in self._pool:
            if not voice.is_playing():
                voice.play(buffer)
                return

        voice = _Voice()
        voice.play(buffer)
        self._pool.append(voice)

    def stop_sound(self, audio_id: AudioId) -> None:
        voice = self._sounds.get(audio_id)
        if voice is not None:
            voice.stop()

    def cleanup_sounds(self) -> None:
        """Drop idle slots from an oversized pool, then refill it to the minimum."""
        if len(self._pool) > self.MINIMUM_POOL_SIZE:
            self._pool = [voice for voice in self._pool if voice.is_playing()]
        while len(self._pool) < self.MINIMUM_POOL_SIZE:
            self._pool.append(_Voice())