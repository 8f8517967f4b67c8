import cv2
import numpy as np

from config.curve_defaults import PWM_MAX


class CurvePreview:
    def __init__(self, width=520, height=400, margin=40):
        self.width = width
        self.height = height
        self.margin = margin
        self.window_name = "WLEDDimCurve Preview"

    def render(self, table, title=""):
        """Draw the table as a polyline on a dark background, returns a BGR image."""
        img = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        img[:] = (30, 30, 30)

        font = cv2.FONT_HERSHEY_SIMPLEX
        m = self.margin
        plot_w = self.width - 2 * m
        plot_h = self.height - 2 * m

        # --- grid, quarters of both axes ---
        for q in range(5):
            gx = m + int(plot_w * q / 4)
            gy = m + int(plot_h * q / 4)
            cv2.line(img, (gx, m), (gx, m + plot_h), (60, 60, 60), 1)
            cv2.line(img, (m, gy), (m + plot_w, gy), (60, 60, 60), 1)

        # --- linear reference ---
        cv2.line(img, (m, m + plot_h), (m + plot_w, m), (90, 90, 90), 1)

        # --- curve ---
        values = np.asarray(table, dtype=np.float64)
        xs = m + np.arange(len(values)) * plot_w / (len(values) - 1)
        ys = m + plot_h - values * plot_h / PWM_MAX
        points = np.stack([xs, ys], axis=1).round().astype(np.int32)
        cv2.polylines(img, [points.reshape(-1, 1, 2)], False, (80, 200, 255), 2)

        if title:
            cv2.putText(img, title, (m, m - 12), font, 0.5, (220, 220, 220), 1)
        cv2.putText(img, "0", (m - 14, m + plot_h + 4), font, 0.35, (200, 200, 200), 1)
        cv2.putText(img, str(PWM_MAX), (4, m + 4), font, 0.35, (200, 200, 200), 1)
        cv2.putText(img, "255", (m + plot_w - 12, m + plot_h + 18), font, 0.35, (200, 200, 200), 1)

        return img

    def show(self, table, title=""):
        """Blocks until a key is pressed in the preview window."""
        cv2.namedWindow(self.window_name, cv2.WINDOW_AUTOSIZE)
        cv2.imshow(self.window_name, self.render(table, title))
        cv2.waitKey(0)
        cv2.destroyWindow(self.window_name)
