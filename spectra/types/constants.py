# No dependencies

CHANNEL_MAX = 255
HUE_MAX = 360.0
ALPHA_MAX = 1.0

# Rec. 709 / sRGB luminance coefficients, applied to 0-255 channels
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)
DARK_LUMA_THRESHOLD = 128

# Decimal places kept for saturation/lightness in hsl()/hsla() strings
HSL_STRING_DIGITS = 2

# Float noise below this many decimals is dropped before rounding to a channel
ROUND_DIGITS = 9

EQUALS_TOLERANCE = 1e-9
