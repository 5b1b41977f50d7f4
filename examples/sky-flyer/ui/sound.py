"""Plays mixer cues and the engine drone through pygame.mixer."""
from __future__ import annotations

import math
from array import array

import pygame

from sky_flyer import AudioMixer, Snapshot, synthesize

SAMPLE_RATE = 22050
DRONE_LEVEL = 0.4
DRONE_RETUNE_HZ = 2.0


def _drone_samples(freq: float) -> array:
    # Whole number of cycles so the loop point is seamless.
    cycles = max(1, round(freq * 0.25))
    n = int(SAMPLE_RATE * cycles / freq)
    out = array("h")
    for i in range(n):
        phase = (i * freq / SAMPLE_RATE) % 1.0
        tri = 4.0 * abs(phase - 0.5) - 1.0
        out.append(int(tri * DRONE_LEVEL * 32767))
    return out


class SoundPlayer:
    """Host side of the audio boundary. Disabled if no mixer device exists."""

    def __init__(self, mixer: AudioMixer) -> None:
        self._mixer = mixer
        self._cache: dict[str, pygame.mixer.Sound] = {}
        self._drone: pygame.mixer.Sound | None = None
        self._drone_hz = 0.0
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            self.enabled = True
        except pygame.error:
            self.enabled = False

    def _sound(self, name: str) -> pygame.mixer.Sound:
        sound = self._cache.get(name)
        if sound is None:
            samples = synthesize(self._mixer.cue(name), SAMPLE_RATE)
            sound = pygame.mixer.Sound(buffer=samples.tobytes())
            self._cache[name] = sound
        return sound

    def update(self, dt: float, snap: Snapshot, playing: bool) -> None:
        gain = self._mixer.advance(dt)
        cues = self._mixer.drain()
        if not self.enabled:
            return
        for cue in cues:
            sound = self._sound(cue.name)
            sound.set_volume(gain)
            sound.play()
        self._update_drone(gain, snap, playing)

    def _update_drone(self, gain: float, snap: Snapshot, playing: bool) -> None:
        if not playing:
            if self._drone is not None:
                self._drone.fadeout(300)
                self._drone = None
            return
        freq = self._mixer.engine_frequency(snap.craft.tilt, snap.boosting)
        if self._drone is None or math.fabs(freq - self._drone_hz) > DRONE_RETUNE_HZ:
            if self._drone is not None:
                self._drone.stop()
            self._drone = pygame.mixer.Sound(buffer=_drone_samples(freq).tobytes())
            self._drone.play(loops=-1)
            self._drone_hz = freq
        self._drone.set_volume(gain)
