# buffers.py
# Flat unsigned-byte views over any bytes-like object.


def byte_view(data) -> memoryview:
    """Return a 1-D ``'B'`` memoryview of ``data``.

    Strided or otherwise non-contiguous buffers are copied first, since
    ``memoryview.cast`` only accepts C-contiguous views.
    """
    view = memoryview(data)
    if not view.c_contiguous:
        view = memoryview(view.tobytes())
    return view.cast('B')
