from .colors import samples_rgb_hsv, samples_rgb_hsl, samples_hex_rgb

__all__ = ["samples_rgb_hsv", "samples_rgb_hsl", "samples_hex_rgb"]
