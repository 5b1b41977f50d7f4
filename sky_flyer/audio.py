"""Audio cue boundary: volume/mute state, drone pitch, and tone synthesis.

The mixer decides *what* should sound and how loud; the host decides how
samples reach a speaker.
"""
from __future__ import annotations

import math
import random as _random
from array import array
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sky_flyer import signals

if TYPE_CHECKING:
    from sky_flyer.signals import SignalBus

GAIN_TIME_CONSTANT = 0.05  # seconds
DRONE_BASE_HZ = 55.0
DRONE_BOOST_HZ = 110.0
DRONE_TILT_HZ = 0.5  # Hz per degree of tilt
SILENCE = 0.001


@dataclass(frozen=True)
class ToneCue:
    """One-shot sound. ``waveform`` is "sine", "square" or "noise".

    For tones the frequency glides from ``start_hz`` to ``end_hz`` over
    ``glide``; for noise the same fields describe a low-pass cutoff sweep.
    """

    name: str
    waveform: str
    start_hz: float
    end_hz: float
    glide: float
    duration: float
    peak: float
    attack: float = 0.01


CUES: dict[str, ToneCue] = {
    signals.SCORE: ToneCue(signals.SCORE, "sine", 880.0, 880.0, 0.0, 0.15, 0.2),
    signals.BOOST: ToneCue(signals.BOOST, "square", 1320.0, 1760.0, 0.1, 0.3, 0.2),
    signals.CRASH: ToneCue(signals.CRASH, "noise", 1000.0, 100.0, 0.4, 0.5, 0.5, attack=0.0),
}


class AudioMixer:
    def __init__(self, volume: float = 0.3, muted: bool = False) -> None:
        self._volume = _clamp01(volume)
        self._muted = muted
        self._gain = self.target_gain
        self._pending: list[str] = []

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def muted(self) -> bool:
        return self._muted

    @property
    def gain(self) -> float:
        """Current smoothed master gain."""
        return self._gain

    @property
    def target_gain(self) -> float:
        return 0.0 if self._muted else self._volume

    def set_volume(self, volume: float) -> None:
        """Set the master level. Raising it above zero also unmutes."""
        self._volume = _clamp01(volume)
        if self._volume > 0 and self._muted:
            self._muted = False

    def toggle_mute(self) -> bool:
        self._muted = not self._muted
        return self._muted

    def advance(self, dt: float) -> float:
        """Move the gain toward its target over ``dt`` seconds; returns the gain."""
        if dt <= 0:
            return self._gain
        alpha = 1.0 - math.exp(-dt / GAIN_TIME_CONSTANT)
        self._gain += (self.target_gain - self._gain) * alpha
        return self._gain

    def engine_frequency(self, tilt: float, boosting: bool) -> float:
        base = DRONE_BOOST_HZ if boosting else DRONE_BASE_HZ
        return base + tilt * DRONE_TILT_HZ

    def cue(self, name: str) -> ToneCue:
        return CUES[name]

    # --- Bus wiring ---

    def attach(self, bus: SignalBus) -> None:
        for name in CUES:
            bus.subscribe(name, self._on_signal)

    def _on_signal(self, signal_name: str, data: dict[str, Any]) -> None:
        if not self._muted:
            self._pending.append(signal_name)

    def drain(self) -> list[ToneCue]:
        """Return and forget the cues requested since the last drain."""
        cues = [CUES[name] for name in self._pending]
        self._pending = []
        return cues


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def _envelope(t: float, cue: ToneCue) -> float:
    if cue.attack > 0 and t < cue.attack:
        return cue.peak * t / cue.attack
    # Exponential fall from peak to SILENCE across the remaining duration.
    span = max(cue.duration - cue.attack, 1e-9)
    frac = min(1.0, (t - cue.attack) / span)
    return cue.peak * (SILENCE / cue.peak) ** frac


def _glide(t: float, cue: ToneCue) -> float:
    if cue.glide <= 0 or t >= cue.glide:
        return cue.end_hz if cue.glide > 0 else cue.start_hz
    return cue.start_hz * (cue.end_hz / cue.start_hz) ** (t / cue.glide)


def synthesize(
    cue: ToneCue,
    sample_rate: int = 22050,
    volume: float = 1.0,
    rng: _random.Random | None = None,
) -> array:
    """Render ``cue`` as signed 16-bit mono samples scaled by ``volume``."""
    if sample_rate <= 0:
        raise ValueError("sample_rate must be positive")
    rng = rng if rng is not None else _random.Random()
    n = int(cue.duration * sample_rate)
    out = array("h")
    phase = 0.0
    smoothed = 0.0
    for i in range(n):
        t = i / sample_rate
        freq = _glide(t, cue)
        if cue.waveform == "noise":
            # One-pole low-pass with a sweeping cutoff.
            k = 1.0 - math.exp(-2.0 * math.pi * freq / sample_rate)
            smoothed += (rng.uniform(-1.0, 1.0) - smoothed) * k
            value = smoothed
        else:
            phase += 2.0 * math.pi * freq / sample_rate
            value = math.sin(phase)
            if cue.waveform == "square":
                value = 1.0 if value >= 0 else -1.0
        sample = value * _envelope(t, cue) * _clamp01(volume)
        out.append(int(max(-1.0, min(1.0, sample)) * 32767))
    return out
