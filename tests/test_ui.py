import pytest

pytest.importorskip("PIL.ImageTk")

from pixgrid.config import GridOptions  # noqa: E402
from pixgrid.sources import MemorySource  # noqa: E402
from pixgrid.ui import App, UIState, cell_size_for  # noqa: E402


class FakeRoot:
    def after(self, ms, fn):
        fn()


class FakeCanvas:
    def __init__(self):
        self.texts = []
        self.cleared = 0

    def delete(self, tag):
        self.cleared += 1

    def create_text(self, *args, **kwargs):
        self.texts.append(kwargs["text"])


def _headless_app(generation: int) -> App:
    app = App.__new__(App)
    app.root = FakeRoot()
    app.canvas = FakeCanvas()
    app.state = UIState(source=MemorySource(), name="missing.png", generation=generation)
    return app


def test_current_error_is_shown():
    app = _headless_app(generation=3)
    app._compute_preview(3, GridOptions(size=4), app.state.source, "missing.png", None)
    assert app.canvas.texts == ["Error: No image loaded from missing.png"]


def test_superseded_error_is_dropped():
    app = _headless_app(generation=5)
    app._compute_preview(4, GridOptions(size=4), app.state.source, "missing.png", None)
    assert app.canvas.texts == []
    assert app.canvas.cleared == 0


def test_cell_size_fits_canvas():
    assert cell_size_for(100, 600) == 6
    assert cell_size_for(200, 600) == 3
    assert cell_size_for(1000, 600) == 1
