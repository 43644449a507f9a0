"""PTO local frame rendering."""

from pathlib import Path

import matplotlib.pyplot as plt

from ..config.settings import VisualizationConfig
from ..pto.config import PtoConfig
from ..pto.errors import OrientationError


class FrameRenderer:
    """Render a PTO's local x/y/z triad on matplotlib 3D axes."""

    def __init__(self, pto: PtoConfig, config: VisualizationConfig | None = None):
        """Initialize the renderer.

        Args:
            pto: PTO whose orientation has been set
            config: Visualization configuration
        """
        self.pto = pto
        self.config = config or VisualizationConfig()

    def draw_frame(self, ax: plt.Axes) -> list:
        """Draw the local axes as arrows starting at the PTO location.

        Args:
            ax: Matplotlib 3D axes to draw on

        Returns:
            List of the quiver artists that were added (x, y, z)

        Raises:
            OrientationError: If the PTO orientation has not been set
        """
        rotation_matrix = self.pto.orientation.rotation_matrix
        if rotation_matrix is None:
            raise OrientationError(
                f"For {self.pto.name}: orientation has not been set; "
                "call set_orientation first.",
                pto_name=self.pto.name,
            )

        origin = self.pto.loc
        length = self.config.axis_length
        artists = []
        for column, (label, color) in enumerate(zip("xyz", self.config.colors)):
            direction = rotation_matrix[:, column] * length
            artists.append(ax.quiver(
                origin[0], origin[1], origin[2],
                direction[0], direction[1], direction[2],
                color=color,
                label=f"{self.pto.name} {label}",
            ))

        ax.scatter(origin[0], origin[1], origin[2], color="black", s=10)
        return artists

    def plot_frame(
        self, save_path: Path | None = None, show: bool = False
    ) -> plt.Figure:
        """Create a figure showing the PTO frame.

        Args:
            save_path: Optional path to save the figure
            show: Whether to display the figure

        Returns:
            The matplotlib figure (closed if it was saved or shown)
        """
        fig = plt.figure(figsize=self.config.figure_size)
        ax = fig.add_subplot(projection="3d")
        self.draw_frame(ax)

        ax.set_xlabel("X (m)")
        ax.set_ylabel("Y (m)")
        ax.set_zlabel("Z (m)")
        ax.set_title(f"PTO frame: {self.pto.name}")
        ax.legend(loc="upper right")

        if save_path:
            fig.savefig(save_path, dpi=self.config.default_dpi, bbox_inches="tight")
        if show:
            plt.show()
        if save_path or show:
            plt.close(fig)
        return fig
