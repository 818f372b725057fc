import pytest

from hashcore.fmt import DigestFmt
from hashcore.md5 import Md5, md5
from hashcore.sha1 import Sha1, sha1
from hashcore.sha256 import Sha256, sha256
from hashcore.sha512 import Sha512, sha512

TWO_BLOCK_MSG = b'abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq'

VECTORS = [
    # RFC 1321 test suite
    (Md5, b'', 'd41d8cd98f00b204e9800998ecf8427e'),
    (Md5, b'a', '0cc175b9c0f1b6a831c399e269772661'),
    (Md5, b'abc', '900150983cd24fb0d6963f7d28e17f72'),
    (Md5, b'message digest', 'f96b697d7cb7938d525a2f31aaf161d0'),
    (Md5, b'abcdefghijklmnopqrstuvwxyz', 'c3fcd3d76192e4007dfb496cca67e13b'),
    (Md5, b'12345678901234567890123456789012345678901234567890123456789012345678901234567890',
     '57edf4a22be3c955ac49da2e2107b67a'),
    # FIPS 180 examples
    (Sha1, b'', 'da39a3ee5e6b4b0d3255bfef95601890afd80709'),
    (Sha1, b'abc', 'a9993e364706816aba3e25717850c26c9cd0d89d'),
    (Sha1, TWO_BLOCK_MSG, '84983e441c3bd26ebaae4aa1f95129e5e54670f1'),
    (Sha256, b'', 'e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855'),
    (Sha256, b'abc', 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'),
    (Sha256, TWO_BLOCK_MSG, '248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1'),
    (Sha512, b'',
     'cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce'
     '47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e'),
    (Sha512, b'abc',
     'ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a'
     '2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f'),
]


@pytest.mark.parametrize('digest, data, expected', VECTORS)
def test_known_vectors(digest, data, expected):
    h = digest.new()
    h.update(data)
    out = h.result()
    assert len(out) == digest.digest_size
    assert str(DigestFmt(out)) == expected


@pytest.mark.parametrize('digest, block_size, digest_size', [
    (Md5, 64, 16),
    (Sha1, 64, 20),
    (Sha256, 64, 32),
    (Sha512, 128, 64),
])
def test_fixed_sizes(digest, block_size, digest_size):
    assert digest.block_size == block_size
    assert digest.digest_size == digest_size
    h = digest()
    h.update(b'x' * (3 * block_size + 5))
    assert len(h.result()) == digest_size


@pytest.mark.parametrize('func, digest', [(md5, Md5), (sha1, Sha1), (sha256, Sha256), (sha512, Sha512)])
def test_one_shot_functions_match_classes(func, digest):
    data = b'The quick brown fox jumps over the lazy dog'
    h = digest.new()
    h.update(data)
    assert func(data) == h.result()
    assert func() == digest().result()


def test_sha2_constants_derivation():
    from hashcore.constants import cbrt_words, first_primes, sqrt_words

    assert first_primes(8) == [2, 3, 5, 7, 11, 13, 17, 19]
    assert sqrt_words(8, 32)[0] == 0x6A09E667
    assert sqrt_words(8, 32)[7] == 0x5BE0CD19
    assert cbrt_words(64, 32)[0] == 0x428A2F98
    assert cbrt_words(64, 32)[63] == 0xC67178F2
    assert sqrt_words(8, 64)[0] == 0x6A09E667F3BCC908
    assert cbrt_words(80, 64)[0] == 0x428A2F98D728AE22
    assert cbrt_words(80, 64)[79] == 0x6C44198C4A475817
