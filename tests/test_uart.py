import pytest

from helmdisplay.uart import MessageQueue, PeekMode, QueueInfo

VTG = "$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48"


def make_queue(size=255, handlers=None):
    return MessageQueue(size, 120, handlers if handlers is not None else {})


def test_single_message_stored():
    queue = make_queue()
    queue.feed((VTG + "\r").encode())
    assert queue.queue_info() == QueueInfo(255, 0, 1)
    assert queue.peek(PeekMode.TAIL, 1) == VTG
    assert queue.peek(PeekMode.HEAD, 0) == VTG


def test_crlf_gives_blank_message():
    queue = make_queue()
    queue.feed((VTG + "\r\n").encode())
    assert queue.queue_info().next_write == 2
    assert queue.peek(PeekMode.TAIL, 1) == ""
    assert queue.peek(PeekMode.TAIL, 2) == VTG


def test_message_split_across_feeds():
    queue = make_queue()
    queue.feed(VTG[:10].encode())
    assert queue.queue_info().next_write == 0
    queue.feed((VTG[10:] + "\n").encode())
    assert queue.peek(PeekMode.ABSOLUTE, 0) == VTG


def test_leading_whitespace_skipped():
    queue = make_queue()
    queue.feed(b"  \t$ABC, x\n")
    assert queue.peek(PeekMode.ABSOLUTE, 0) == "$ABC, x"


def test_overlong_message_discarded():
    queue = make_queue()
    queue.feed(b"A" * 120 + b"\n")
    assert queue.peek(PeekMode.ABSOLUTE, 0) == ""
    queue.feed(b"B" * 119 + b"\n")
    assert queue.peek(PeekMode.ABSOLUTE, 1) == "B" * 119


def test_decode_calls_matching_handler():
    seen = []
    queue = make_queue(handlers={"VTG": seen.append, "GGA": lambda m: seen.append("gga")})
    queue.feed((VTG + "\n").encode())
    assert queue.decode_next() is True
    assert seen == [VTG]
    assert queue.decode_next() is False


def test_decode_rejects_bad_messages():
    seen = []
    queue = make_queue(handlers={"VTG": seen.append})
    queue.feed(b"$$GVTG,1,2\n$GPVTG\n#GPVTG,1,2\n")
    assert queue.decode_all() == 3
    assert seen == []


def test_decode_accepts_bang_start():
    seen = []
    queue = make_queue(handlers={"VTG": seen.append})
    queue.feed(b"!AIVTG,1,2\n")
    queue.decode_all()
    assert seen == ["!AIVTG,1,2"]


def test_decode_all_empties_queue():
    queue = make_queue()
    queue.feed(b"one\ntwo\nthree\n")
    assert queue.decode_all() == 3
    info = queue.queue_info()
    assert info.next_read == info.next_write


def test_full_queue_drops_oldest():
    queue = make_queue(size=4)
    queue.feed(b"m1\n")
    queue.decode_next()
    queue.feed(b"m2\nm3\nm4\nm5\n")
    info = queue.queue_info()
    assert info.next_read == 2
    assert queue.peek(PeekMode.HEAD, 0) == "m3"
    assert queue.peek(PeekMode.TAIL, 1) == "m5"


def test_absolute_peek_out_of_range():
    queue = make_queue(size=4)
    assert queue.peek(PeekMode.ABSOLUTE, 4) is None
    assert queue.peek(PeekMode.ABSOLUTE, -1) is None


def test_default_handlers_decode_vtg_without_error():
    queue = MessageQueue()
    queue.feed((VTG + "\n").encode())
    assert queue.decode_all() == 1


@pytest.mark.parametrize("size, message_size", [(0, 120), (4, 1)])
def test_invalid_construction(size, message_size):
    with pytest.raises(ValueError):
        MessageQueue(size, message_size, {})