"""
Unit conversion for reporting millimeter measurements.
"""


class UnitConverter:
    """
    Converts millimeter lengths into the unit chosen for display.

    Supports two unit types:
    - mm: Millimeters (no conversion)
    - inches: Inches
    """

    # Conversion constant
    MM_PER_INCH = 25.4

    UNITS = ("mm", "inches")

    def __init__(self, units="mm"):
        """
        Initialize the unit converter.

        Args:
            units: Display unit type ("mm" or "inches")
        """
        self.set_units(units)

    def set_units(self, units):
        """Change the display unit type"""
        if units not in self.UNITS:
            raise ValueError(f"Units must be one of {self.UNITS}")
        self.units = units

    def from_mm(self, value):
        """Convert a millimeter value to the display unit"""
        if self.units == "inches":
            return value / self.MM_PER_INCH
        return float(value)

    def get_unit_label(self):
        """
        Get display label for the unit type.

        Returns:
            String label ("mm" or "in")
        """
        if self.units == "inches":
            return "in"
        return "mm"

    def format(self, value_mm):
        """Format a millimeter value in the display unit, e.g. '72.00 mm'"""
        digits = 3 if self.units == "inches" else 2
        return f"{self.from_mm(value_mm):.{digits}f} {self.get_unit_label()}"
