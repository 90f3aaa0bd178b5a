import io

from bwkit.console import Console, singleton


class _RecordingStream(io.StringIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


def test_print_and_println():
    out = io.StringIO()
    console = Console(out)
    console.print("a")
    console.println("b")
    console.newline()
    assert out.getvalue() == "ab\n\n"


def test_print_int_negative():
    out = io.StringIO()
    Console(out).print_int(-3)
    assert out.getvalue() == "-3"


def test_print_unsigned_wraps():
    out = io.StringIO()
    console = Console(out)
    console.print_unsigned(12)
    console.print(" ")
    console.print_unsigned(-1)
    first, second = out.getvalue().split()
    assert first == "12"
    assert int(second) == 2**32 - 1


def test_printf_formats():
    out = io.StringIO()
    Console(out).printf("%d-%s", 3, "x")
    assert out.getvalue() == "3-x"


def test_printf_clips_long_output():
    out = io.StringIO()
    Console(out).printf("%s", "q" * 20000)
    assert 0 < len(out.getvalue()) < 8192


def test_flush_reaches_stream():
    out = _RecordingStream()
    Console(out).flush()
    assert out.flushes >= 1


def test_default_console_writes_stdout(capsys):
    Console().println("hi")
    assert capsys.readouterr().out == "hi\n"


def test_singleton_is_shared(capsys):
    assert singleton() is singleton()
    singleton().print("z")
    assert capsys.readouterr().out == "z"