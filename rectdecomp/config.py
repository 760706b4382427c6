"""
Configuration for rectilinear decomposition.

Defines how input is normalised, how pairing failures are handled, and how
results are rendered.
"""

from dataclasses import dataclass
import json
from pathlib import Path


@dataclass
class DecompConfig:
    """
    Settings for a decomposition run.

    Attributes:
        normalize_winding: Reverse counter-clockwise input so left walls bound the
            interior on their right
        strict_pairing: Raise UnpairedWallError when a left wall has no right wall
            on a scanline, instead of logging a warning and moving on
        log_snapshots: Log the active node/edge lists at DEBUG level while sweeping
        plot_dpi: Resolution of rendered PNG files
        plot_show_labels: Number the rectangles in rendered PNG files
    """
    # Input handling
    normalize_winding: bool = True

    # Sweep
    strict_pairing: bool = False
    log_snapshots: bool = False

    # Rendering
    plot_dpi: int = 150
    plot_show_labels: bool = True

    def validate(self) -> list[str]:
        """
        Validate configuration values.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.plot_dpi < 10:
            errors.append(f"plot_dpi must be >= 10, got {self.plot_dpi}")
        if self.plot_dpi > 1200:
            errors.append(f"plot_dpi {self.plot_dpi} is excessive (max recommended: 1200)")

        return errors

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "normalize_winding": self.normalize_winding,
            "strict_pairing": self.strict_pairing,
            "log_snapshots": self.log_snapshots,
            "plot_dpi": self.plot_dpi,
            "plot_show_labels": self.plot_show_labels,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DecompConfig":
        """Create from dictionary. Missing keys fall back to defaults."""
        return cls(
            normalize_winding=data.get("normalize_winding", True),
            strict_pairing=data.get("strict_pairing", False),
            log_snapshots=data.get("log_snapshots", False),
            plot_dpi=data.get("plot_dpi", 150),
            plot_show_labels=data.get("plot_show_labels", True),
        )

    def save(self, filepath: Path | str) -> None:
        """Save configuration to JSON file."""
        filepath = Path(filepath)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: Path | str) -> "DecompConfig":
        """Load configuration from JSON file."""
        filepath = Path(filepath)
        if not filepath.exists():
            return cls()  # Return defaults if file doesn't exist

        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)
