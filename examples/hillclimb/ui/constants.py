"""Layout constants and color definitions."""

# Timing
FPS = 60

# Window
DEFAULT_W = 960
DEFAULT_H = 540
TITLE = "Summit - hill climb demo"

# Fuel bar
FUEL_BAR_W = 200
FUEL_BAR_H = 14
FUEL_BAR_PAD = 16
FUEL_WARNING = 40   # percent
FUEL_CRITICAL = 15

# Colors
TEXT_COLOR = (230, 236, 245)
TEXT_DIM = (140, 150, 170)
ACCENT = (57, 255, 20)
RECORD_COLOR = (255, 215, 0)
FUEL_BG = (20, 28, 40)
FUEL_BORDER = (80, 90, 110)
FUEL_OK = (57, 255, 20)
FUEL_WARN = (255, 190, 40)
FUEL_LOW = (255, 60, 60)
OVERLAY = (0, 0, 0, 150)

# Truck
BODY_COLOR = (220, 60, 40)
CAB_COLOR = (250, 120, 70)
WINDOW_COLOR = (150, 210, 255)
TIRE_COLOR = (25, 25, 25)
HUB_COLOR = (160, 160, 170)
