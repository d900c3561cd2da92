"""
Shared primitive data types.

Basic geometric types used by the controller, the visual surface
and input handling.
"""

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Point2D(BaseModel):
    """Immutable 2D point for screen positions and offsets.

    Attributes:
        x: X coordinate (horizontal, pixels)
        y: Y coordinate (vertical, pixels)

    Examples:
        >>> click = Point2D(x=100.0, y=200.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)  # Immutable

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Size(BaseModel):
    """Pixel dimensions of an area or element.

    Zero is allowed: a play area that has not been laid out yet
    reports 0x0.

    Examples:
        >>> Size(width=800, height=600)
    """
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Size({self.width}x{self.height})"


class Rectangle(BaseModel):
    """Immutable rectangle defined by top-left position and dimensions.

    Used for hit testing the target and the start button.
    Position is at top-left corner (pygame convention).

    Examples:
        >>> rect = Rectangle(x=100.0, y=100.0, width=50.0, height=50.0)
        >>> rect.contains_point(Point2D(x=125.0, y=125.0))
        True
    """
    x: float
    y: float
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def right(self) -> float:
        """Get right edge x coordinate."""
        return self.x + self.width

    @computed_field
    @property
    def bottom(self) -> float:
        """Get bottom edge y coordinate."""
        return self.y + self.height

    def contains_point(self, point: Point2D) -> bool:
        """Check if a point is inside the rectangle.

        Left and top edges are inside, right and bottom are not, matching
        pygame.Rect.collidepoint.
        """
        return (self.x <= point.x < self.right and
                self.y <= point.y < self.bottom)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
