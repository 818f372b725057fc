import io

from Crypto.Random import get_random_bytes

from hashcore.fmt import DigestFmt
from hashcore.sha256 import Sha256


def test_empty_buffer():
    assert str(DigestFmt(b'')) == ''
    assert len(DigestFmt(b'')) == 0
    assert list(DigestFmt(b'')) == []


def test_every_byte_value():
    rendered = str(DigestFmt(bytes(range(256))))
    assert len(rendered) == 512
    assert rendered[:8] == '00010203'
    assert rendered[-4:] == 'feff'
    assert rendered == rendered.lower()
    assert bytes.fromhex(rendered) == bytes(range(256))


def test_random_buffers_decode_back():
    for size in (1, 16, 20, 32, 64, 1000):
        data = get_random_bytes(size)
        rendered = str(DigestFmt(data))
        assert len(rendered) == 2 * size
        assert set(rendered) <= set('0123456789abcdef')
        assert bytes.fromhex(rendered) == data
        assert rendered == data.hex()


def test_lazy_pairs_and_writer():
    fmt = DigestFmt(bytearray(b'\x0f\xa0\xff'))
    pairs = iter(fmt)
    assert next(pairs) == '0f'
    assert next(pairs) == 'a0'
    assert next(pairs) == 'ff'

    out = io.StringIO()
    assert fmt.write(out) == 6
    assert out.getvalue() == '0fa0ff'


def test_format_spec_applies_to_rendered_text():
    fmt = DigestFmt(b'\xab\xcd')
    assert f'{fmt}' == 'abcd'
    assert f'[{fmt:>6}]' == '[  abcd]'
    assert repr(fmt) == "DigestFmt('abcd')"


def test_renders_digest_output():
    h = Sha256.new()
    h.update(b'abc')
    assert str(DigestFmt(h.result())) == 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'


def test_strided_buffer():
    view = memoryview(b'abcdef')[::2]
    fmt = DigestFmt(view)
    assert str(fmt) == b'ace'.hex()
    assert len(fmt) == 6
    out = io.StringIO()
    assert fmt.write(out) == 6
    assert out.getvalue() == '616365'
