import pytest

from pixmill import (
    FilterKind,
    ImageSession,
    InvalidDimensions,
    InvalidSeedCount,
    MissingImage,
    MosaicRequest,
    NoHistory,
    PatternRequest,
    PixelBuffer,
    SessionState,
    UnsupportedFilter,
    apply_filter,
    generate_pattern,
)


@pytest.fixture
def session():
    s = ImageSession()
    s.generate("checkerboard", 1, 1)
    return s


def test_empty_session():
    s = ImageSession()
    assert s.state is SessionState.EMPTY
    with pytest.raises(MissingImage):
        s.get_current()
    with pytest.raises(MissingImage):
        s.apply_filter(FilterKind.BLUR)
    with pytest.raises(MissingImage):
        s.mosaic(3)
    with pytest.raises(MissingImage):
        s.original


def test_undo_right_after_generate(session):
    assert session.state is SessionState.LOADED
    with pytest.raises(NoHistory):
        session.undo()
    with pytest.raises(NoHistory):
        session.redo()


def test_undo_and_redo_one_filter(session):
    before = session.current.clone()
    after = session.apply_filter(FilterKind.BLUR)
    assert session.current is after

    assert session.undo() == before
    assert session.current == before
    assert session.redo() == after
    assert session.current == after
    with pytest.raises(NoHistory):
        session.redo()


def test_new_transform_after_undo_drops_redo(session):
    session.apply_filter("blur")
    session.undo()
    assert session.can_redo
    session.apply_filter("sepia")
    assert not session.can_redo
    with pytest.raises(NoHistory):
        session.redo()


def test_several_undos(session):
    start = session.current.clone()
    session.apply_filter("blur")
    session.apply_filter("sharpen")
    session.mosaic(2, rng=3)
    session.undo()
    session.undo()
    session.undo()
    assert session.current == start
    assert not session.can_undo


def test_load_copies_and_clears_history(session, gradient):
    session.apply_filter("blur")
    session.load(gradient)
    assert not session.can_undo and not session.can_redo
    gradient.set(0, 0, 1, 2, 3)
    assert session.current.get(0, 0) != (1, 2, 3)
    assert session.original == session.current


def test_generate_clears_history(session):
    session.apply_filter("blur")
    session.undo()
    session.generate("swiss_flag", 32, 32)
    assert session.current.shape == (32, 32)
    assert not session.can_undo and not session.can_redo


def test_failed_requests_leave_session_untouched(session):
    before = session.current
    with pytest.raises(UnsupportedFilter):
        session.apply_filter("emboss")
    with pytest.raises(InvalidSeedCount):
        session.mosaic(0)
    with pytest.raises(InvalidDimensions):
        session.generate("french_flag", 3, 3)
    assert session.current is before
    assert not session.can_undo


def test_current_matches_standalone_filter(gradient):
    s = ImageSession()
    s.load(gradient)
    assert s.apply_filter("dither") == apply_filter(gradient, "dither")


def test_original_survives_filters(session):
    first = session.current.clone()
    session.apply_filter("sepia")
    assert session.original == first


def test_history_can_be_disabled(gradient):
    s = ImageSession(track_history=False)
    s.load(gradient)
    s.apply_filter("blur")
    assert not s.can_undo
    with pytest.raises(NoHistory):
        s.undo()


def test_history_limit(session):
    session.apply_filter("blur")
    session.apply_filter("blur")
    session.apply_filter("blur")
    limited = ImageSession(history_limit=2)
    limited.load(session.original)
    for _ in range(3):
        limited.apply_filter("blur")
    limited.undo()
    limited.undo()
    with pytest.raises(NoHistory):
        limited.undo()


def test_apply_requests():
    s = ImageSession()
    s.apply(PatternRequest("vertical_rainbow", 2, 7))
    assert s.current == generate_pattern("vertical_rainbow", 2, 7)
    s.apply(FilterKind.GREYSCALE)
    s.apply(MosaicRequest(1, seed=0))
    assert s.can_undo
    with pytest.raises(InvalidSeedCount):
        MosaicRequest(0)


def test_reset(session):
    session.apply_filter("blur")
    session.reset()
    assert session.state is SessionState.EMPTY
    assert not session.can_undo


def test_load_rejects_non_buffers():
    with pytest.raises(TypeError):
        ImageSession().load([[(0, 0, 0)]])


def test_load_accepts_any_buffer():
    s = ImageSession()
    s.load(PixelBuffer(1, 1))
    assert s.current.shape == (1, 1)
