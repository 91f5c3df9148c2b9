import pytest

from thzimage.image_series import ImageSeriesWriter


class RecordingWriter:
    def __init__(self, path, log, init_result=True, write_result=True):
        self.path = path
        self.log = log
        self.init_result = init_result
        self.write_result = write_result

    def init(self):
        self.log.append(("init", self.path))
        return self.init_result

    def write(self, dimensions, buffer):
        self.log.append(("write", self.path, dimensions, list(buffer)))
        return self.write_result

    def deinit(self):
        self.log.append(("deinit", self.path))


def factory(log, **kwargs):
    return lambda path: RecordingWriter(path, log, **kwargs)


def test_path_is_zero_padded():
    sut = ImageSeriesWriter.create("img_?.bmp", factory([]), 7)
    assert sut.current_path() == "img_000007.bmp"


def test_number_advances_by_increments_after_deinit():
    log = []
    sut = ImageSeriesWriter.create("img_?.bmp", factory(log), 7, 5)
    assert sut.init() is True
    sut.deinit()
    assert sut.current_path() == "img_000012.bmp"
    assert log == [("init", "img_000007.bmp"), ("deinit", "img_000007.bmp")]


def test_each_image_goes_to_its_own_file():
    log = []
    sut = ImageSeriesWriter.create("frame?.qoi", factory(log))
    paths = []
    for _ in range(3):
        paths.append(sut.current_path())
        assert sut.init()
        assert sut.write((1, 1), ["p"])
        sut.deinit()
    assert len(set(paths)) == 3
    written = [entry[1] for entry in log if entry[0] == "write"]
    assert written == paths


def test_write_before_init_fails():
    log = []
    sut = ImageSeriesWriter.create("a?.bmp", factory(log))
    assert sut.write((2, 2), [0, 0, 0, 0]) is False
    assert log == []


def test_write_after_deinit_fails():
    sut = ImageSeriesWriter.create("a?.bmp", factory([]))
    assert sut.init()
    sut.deinit()
    assert sut.write((1, 1), [0]) is False


def test_results_of_wrapped_writer_are_relayed():
    log = []
    sut = ImageSeriesWriter.create("a?.bmp", factory(log, init_result=False, write_result=False))
    assert sut.init() is False
    assert sut.write((1, 1), [3]) is False
    assert log[-1] == ("write", sut.current_path(), (1, 1), [3])


def test_deinit_without_init_still_advances():
    sut = ImageSeriesWriter.create("x?", factory([]), 1, 2)
    before = sut.current_path()
    sut.deinit()
    sut.deinit()
    other = ImageSeriesWriter.create("x?", factory([]), 5, 2)
    assert sut.current_path() == other.current_path()
    assert before != sut.current_path()


def test_zero_increments_rejected():
    with pytest.raises(ValueError):
        ImageSeriesWriter.create("img?.bmp", factory([]), 0, 0)


@pytest.mark.parametrize("path", ["image.bmp", "img??.bmp", "?a?"])
def test_path_needs_exactly_one_placeholder(path):
    with pytest.raises(ValueError):
        ImageSeriesWriter.create(path, factory([]))


def test_path_length_limit():
    ok_path = "?" + "a" * 508
    assert len(ImageSeriesWriter.create(ok_path, factory([])).current_path()) == 514
    with pytest.raises(ValueError):
        ImageSeriesWriter.create("?" + "a" * 509, factory([]))