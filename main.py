# NOTE: For displaying the parsed image in a GUI,
#       please download PyQt5.
#
# Installation (in terminal):
#   pip install PyQt5
import logging
import sys
from PyQt5.QtWidgets import (
    QApplication, QWidget, QVBoxLayout, QPushButton, QLabel,
    QFileDialog, QTextEdit, QSlider, QHBoxLayout, QCheckBox
)
from PyQt5.QtGui import QPixmap, QImage, qRgb
from PyQt5.QtCore import Qt
from bitmap import PBMFormat
from config import get_config
from errors import PBMError
from logger import setup_logging
from pbm_parser import PBMParser
from pbm_writer import PBMWriter

log = logging.getLogger("pbm.viewer")

BLACK = qRgb(0, 0, 0)
WHITE = qRgb(255, 255, 255)


def apply_transform(bitmap, name):
    """Run invert/flip/flop on the bitmap, returning an error message or None.

    Decoded rows may be shorter than the declared width, which the transforms
    cannot walk. The bitmap is left untouched when that happens.
    """
    saved = [list(row) for row in bitmap.rows]
    try:
        getattr(bitmap, name)()
    except IndexError as exc:
        bitmap.rows = saved
        log.error("cannot %s %s: %s", name, bitmap, exc)
        return f"Error: cannot {name} image, rows do not match its {bitmap.width}x{bitmap.height} size"
    return None


class PBMViewer(QWidget):
    def __init__(self, config=None):
        super().__init__()
        self.config = config or get_config()
        self.setWindowTitle("PBM Viewer")
        self.resize(self.config["window_width"], self.config["window_height"] + 100)

        # Currently loaded bitmap and zoom factor
        self.bitmap = None
        self.scale = 1

        layout = QVBoxLayout()

        top_layout = QHBoxLayout()

        # Button to open PBM file
        self.open_button = QPushButton("Open PBM File")
        self.open_button.setFixedSize(120, 50)
        self.open_button.clicked.connect(self.open_file)
        top_layout.addWidget(self.open_button)

        # Transform buttons
        self.invert_button = QPushButton("Invert")
        self.flip_button = QPushButton("Flip")
        self.flop_button = QPushButton("Flop")
        self.invert_button.clicked.connect(lambda: self.transform("invert"))
        self.flip_button.clicked.connect(lambda: self.transform("flip"))
        self.flop_button.clicked.connect(lambda: self.transform("flop"))
        for btn in (self.invert_button, self.flip_button, self.flop_button):
            btn.setFixedSize(80, 50)
            top_layout.addWidget(btn)

        top_layout.addStretch()

        # Checked saves packed binary (P4), unchecked plain text (P1)
        self.binary_button = QCheckBox("P4")
        self.binary_button.setFixedSize(50, 30)
        top_layout.addWidget(self.binary_button)

        # Button to save PBM file
        self.save_button = QPushButton("Save PBM File")
        self.save_button.setFixedSize(120, 50)
        self.save_button.clicked.connect(self.save_file)
        top_layout.addWidget(self.save_button)

        layout.addLayout(top_layout)

        # Label to display the image
        self.image_label = QLabel("No Image Loaded")
        self.image_label.setStyleSheet("border: 1px solid black; background: white;")
        self.image_label.setAlignment(Qt.AlignCenter)
        self.image_label.setFixedSize(self.config["window_width"], self.config["window_height"])
        layout.addWidget(self.image_label)

        # Text box to display PBM metadata
        self.metadata_box = QTextEdit("No Metadata Loaded")
        self.metadata_box.setMinimumHeight(100)
        self.metadata_box.setReadOnly(True)
        layout.addWidget(self.metadata_box)

        # Slider for scaling the image, PBMs are often tiny
        self.scale_slider = QSlider(Qt.Horizontal)
        self.scale_slider.setRange(1, self.config["max_scale"])
        self.scale_slider.setValue(1)
        self.scale_slider.valueChanged.connect(self.update_image)
        layout.addWidget(QLabel("Scale"))
        layout.addWidget(self.scale_slider)

        self.setLayout(layout)

    # Open PBM file and load pixel data
    def open_file(self):
        filepath, _ = QFileDialog.getOpenFileName(self, "Open PBM File", "", "PBM Files (*.pbm)")
        if not filepath:
            return

        parser = PBMParser(filepath)
        try:
            self.bitmap = parser.load()
        except PBMError as exc:
            log.error("could not load %s: %s", filepath, exc)
            self.metadata_box.setText(f"Error: {exc}")
            return

        # Display metadata
        meta_text = ""
        for k, v in parser.metadata.items():
            meta_text += f"{k}: {v}\n"
        self.metadata_box.setText(meta_text)

        self.binary_button.setChecked(self.bitmap.format is PBMFormat.PACKED_BINARY)
        self.update_image()

    def transform(self, name):
        if self.bitmap is None:
            return
        error = apply_transform(self.bitmap, name)
        if error:
            self.metadata_box.append(error)
        self.update_image()

    # Redraw the bitmap at the current scale
    def update_image(self):
        if self.bitmap is None:
            return

        self.scale = self.scale_slider.value()
        width, height = self.bitmap.size()

        image = QImage(width * self.scale, height * self.scale, QImage.Format_RGB32)
        image.fill(WHITE)

        for y, row in enumerate(self.bitmap.rows[:height]):
            # Rows may be shorter or longer than the declared width
            for x, pixel in enumerate(row[:width]):
                if not pixel:
                    continue
                for dy in range(self.scale):
                    for dx in range(self.scale):
                        image.setPixel(x * self.scale + dx, y * self.scale + dy, BLACK)

        pixmap = QPixmap.fromImage(image)
        self.image_label.setPixmap(pixmap)

    def save_file(self):
        if self.bitmap is None:
            return

        output_filepath, _ = QFileDialog.getSaveFileName(self, "Save PBM File", "", "PBM Files (*.pbm)")
        if not output_filepath:
            return

        if self.binary_button.isChecked():
            self.bitmap.set_format(PBMFormat.PACKED_BINARY)
        else:
            self.bitmap.set_format(PBMFormat.PLAIN_TEXT)

        try:
            info = PBMWriter(output_filepath).save(self.bitmap)
        except PBMError as exc:
            log.error("could not save %s: %s", output_filepath, exc)
            self.metadata_box.append(f"Error: {exc}")
            return

        self.metadata_box.append(f"Saved to {info['path']}")
        self.metadata_box.append(f"Format: {info['format']}")
        self.metadata_box.append(f"Size: {info['bytes_written']} bytes")


if __name__ == "__main__":
    setup_logging(get_config()["log_level"])
    app = QApplication(sys.argv)
    viewer = PBMViewer()
    viewer.show()
    sys.exit(app.exec_())
