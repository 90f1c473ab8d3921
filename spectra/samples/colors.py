# Reference values for tests: integer RGB -> exact cylindrical channels.
# Fractions are written out so the expected values carry no rounding.

samples_rgb_hsv = {
    (255, 0, 0): (0.0, 1.0, 1.0),
    (0, 255, 0): (120.0, 1.0, 1.0),
    (0, 0, 255): (240.0, 1.0, 1.0),
    (255, 255, 0): (60.0, 1.0, 1.0),
    (0, 255, 255): (180.0, 1.0, 1.0),
    (255, 0, 255): (300.0, 1.0, 1.0),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
    (255, 25, 75): (360 - 60 * 50 / 230, 230 / 255, 1.0),
    (68, 170, 255): (240 - 60 * 102 / 187, 187 / 255, 1.0),
    (0, 128, 128): (180.0, 1.0, 128 / 255),
    (255, 128, 0): (60 * 128 / 255, 1.0, 1.0),
    (100, 200, 50): (100.0, 0.75, 200 / 255),
}

samples_rgb_hsl = {
    (255, 0, 0): (0.0, 1.0, 0.5),
    (0, 255, 0): (120.0, 1.0, 0.5),
    (0, 0, 255): (240.0, 1.0, 0.5),
    (255, 255, 0): (60.0, 1.0, 0.5),
    (0, 255, 255): (180.0, 1.0, 0.5),
    (255, 0, 255): (300.0, 1.0, 0.5),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
    (255, 25, 75): (360 - 60 * 50 / 230, 1.0, 140 / 255),
    (68, 170, 255): (240 - 60 * 102 / 187, 1.0, 323 / 510),
    (0, 128, 128): (180.0, 1.0, 64 / 255),
    (255, 128, 0): (60 * 128 / 255, 1.0, 0.5),
    (100, 200, 50): (100.0, 0.6, 250 / 510),
}

samples_hex_rgb = {
    "#ff194b": (255, 25, 75),
    "#FF194b": (255, 25, 75),
    "#4Af": (68, 170, 255),
    "#44aaff": (68, 170, 255),
    "#0f7": (0, 255, 119),
    "#f87": (255, 136, 119),
    "#000": (0, 0, 0),
    "#FFFFFF": (255, 255, 255),
    "#008080": (0, 128, 128),
}
