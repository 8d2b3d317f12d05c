"""Timing utilities."""

import logging
import time
from typing import Optional

import torch


class Timer:
    """Context manager for timing code blocks with CUDA synchronization support."""

    def __init__(
        self,
        name: str = "Operation",
        device: str = "cpu",
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize timer.

        Args:
            name: Name/description of the operation being timed
            device: Device string ("cpu" or "cuda"). With "cuda", pending GPU
                    work is synchronized before reading the clock.
            logger: Logger receiving the elapsed time (debug level); silent if None
        """
        self.name = name
        self.device = device
        self.logger = logger
        self.start_time: Optional[float] = None
        self.elapsed_time: Optional[float] = None

    def __enter__(self) -> "Timer":
        """Start timing."""
        if self.device == "cuda":
            torch.cuda.synchronize()
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Stop timing and record elapsed time."""
        if self.start_time is not None:
            if self.device == "cuda":
                torch.cuda.synchronize()
            self.elapsed_time = time.perf_counter() - self.start_time
            if self.logger is not None:
                self.logger.debug(f"{self.name} took {self.elapsed_time:.4f} seconds")

    @property
    def elapsed(self) -> float:
        """Get elapsed time in seconds."""
        if self.elapsed_time is None:
            raise ValueError("Timer has not been used as context manager yet")
        return self.elapsed_time
