import numpy as np
from PIL import Image as PIM

"""
Pixel buffer for rendered images and its serialization.

Pixels hold linear, unclamped colors; clamping to 0..255 happens only when
the canvas is written out.
"""

PPM_LINE_WIDTH = 70


class Canvas(object):

    def __init__(self, width, height):
        """Create a width x height canvas with every pixel black."""
        self.pixels = np.zeros((height, width, 3), np.float64)

    @property
    def width(self):
        return self.pixels.shape[1]

    @property
    def height(self):
        return self.pixels.shape[0]

    def write_pixel(self, x, y, color):
        self.pixels[y, x] = color

    def pixel_at(self, x, y):
        return self.pixels[y, x]

    def to_uint8(self):
        """Channels scaled to 0..255, rounded half up and clamped."""
        return np.clip(np.floor(self.pixels * 255.0 + 0.5), 0, 255).astype(np.uint8)

    def to_ppm(self):
        """Serialize as plain-text PPM (P3), wrapping lines at 70 characters."""
        lines = ["P3", "{} {}".format(self.width, self.height), "255"]
        for row in self.to_uint8():
            line = ""
            for value in row.flatten():
                token = str(value)
                if not line:
                    line = token
                elif len(line) + 1 + len(token) > PPM_LINE_WIDTH:
                    lines.append(line)
                    line = token
                else:
                    line += " " + token
            lines.append(line)
        return "\n".join(lines) + "\n"

    def PIL(self):
        return PIM.fromarray(self.to_uint8())

    def save(self, output_path):
        """Write the canvas to disk: .ppm as text, anything else through Pillow."""
        if str(output_path).lower().endswith('.ppm'):
            with open(output_path, 'w') as f:
                f.write(self.to_ppm())
        else:
            self.PIL().save(output_path)
