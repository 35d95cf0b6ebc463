"""Samples and the runner that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class Sample(ABC):
    """A named demo that can be initialised, updated and rendered."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def init(self) -> None:
        """Prepare the sample; called each time it becomes current."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the sample by dt seconds."""

    @abstractmethod
    def render(self, width: int, height: int) -> None:
        """Draw the sample into a viewport of the given size."""


class SampleRunner:
    """Holds samples and forwards update and render to the current one."""

    def __init__(self) -> None:
        self.samples: list = []
        self.current: Optional[Sample] = None
        self.current_number = -1

    def _require_current(self) -> Sample:
        if self.current is None:
            raise RuntimeError("no sample has been added")
        return self.current

    def update(self, dt: float) -> None:
        self._require_current().update(dt)

    def render(self, width: int, height: int) -> None:
        self._require_current().render(width, height)

    def add_sample(self, sample: Sample) -> None:
        """Add a sample once; the first one added becomes current."""
        if any(existing is sample for existing in self.samples):
            return
        self.samples.append(sample)
        if self.current is None:
            self.current = sample
            self.current_number = 0
            self._sample_changed()

    def switch_to_sample_number(self, num: int) -> None:
        """Switch to the sample at num; out-of-range numbers are ignored."""
        if 0 <= num < len(self.samples):
            self.current = self.samples[num]
            self.current_number = num
            self._sample_changed()

    def switch_to_sample_with_name(self, name: str) -> None:
        """Switch to the first sample with this name, if any."""
        for number, sample in enumerate(self.samples):
            if sample.name == name:
                self.current = sample
                self.current_number = number
                self._sample_changed()
                break

    def next_sample(self) -> None:
        """Switch to the following sample, wrapping around."""
        if not self.samples:
            raise RuntimeError("no sample has been added")
        self.current_number = (self.current_number + 1) % len(self.samples)
        self.current = self.samples[self.current_number]
        self._sample_changed()

    def _sample_changed(self) -> None:
        print(f"Switched to sample {self.current.name}")
        self.current.init()