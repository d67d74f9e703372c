"""
Base class for gearprofile solid geometry.

Provides the shared export and display methods for build123d-backed
geometry classes.
"""

import logging

logger = logging.getLogger(__name__)


class BaseGeometry:
    """Base class providing shared export/display methods for geometry classes.

    Subclasses must:
    - Set self._part = None in __init__
    - Implement build() -> Part
    - Set _part_name class attribute for log messages
    """

    _part_name: str = "part"

    def show(self):
        """Display in OCP viewer (requires ocp_vscode)."""
        part = self.build()
        try:
            from ocp_vscode import show as ocp_show
            ocp_show(part)
        except ImportError:
            logger.info("ocp_vscode not installed, skipping viewer")
        return part

    def export_step(self, filepath: str):
        """Export to STEP file (builds if not already built)."""
        if self._part is None:
            self.build()

        logger.info(f"Exporting {self._part_name}: volume={self._part.volume:.2f}")
        from build123d import export_step
        export_step(self._part, str(filepath))
        logger.info(f"Exported {self._part_name} to {filepath}")
