"""Tests for the Generator / Source / SpatializedSource capabilities."""

import pytest

from synthizer_safe import (
    BufferGenerator,
    Context,
    DirectSource,
    Generator,
    NoiseGenerator,
    PannedSource,
    Source,
    Source3D,
    SpatializedSource,
    StreamingGenerator,
    SynthizerError,
)
from synthizer_safe.testing import MockErrorCode


class TestDeclaredCapabilities:
    """Each entity satisfies exactly the capabilities it declares."""

    @pytest.mark.parametrize("cls", [BufferGenerator, NoiseGenerator, StreamingGenerator])
    def test_generators(self, cls):
        assert Generator in cls.__mro__
        assert Source not in cls.__mro__

    @pytest.mark.parametrize("cls", [DirectSource, PannedSource, Source3D])
    def test_sources(self, cls):
        assert Source in cls.__mro__

    def test_spatialized(self):
        assert SpatializedSource in PannedSource.__mro__
        assert SpatializedSource in Source3D.__mro__
        assert SpatializedSource not in DirectSource.__mro__

    def test_context_declares_nothing(self):
        assert Source not in Context.__mro__
        assert Generator not in Context.__mro__

    def test_isinstance_does_not_touch_engine(self, context, mock):
        source = context.new_source3d()
        mock.reset_calls()

        assert isinstance(source, SpatializedSource)
        assert isinstance(source, Source)
        assert mock.calls == []

    def test_context_is_not_a_source(self, context):
        assert not isinstance(context, Source)


class TestGeneratorWiring:
    """add_generator / remove_generator through any source variant."""

    @pytest.mark.parametrize("make_source", ["new_direct_source", "new_panned_source", "new_source3d"])
    @pytest.mark.parametrize(
        "make_generator",
        [
            lambda ctx: ctx.new_buffer_generator(),
            lambda ctx: ctx.new_noise_generator(1),
            lambda ctx: ctx.new_streaming_generator("file", "beep.wav"),
        ],
    )
    def test_add_then_remove(self, context, mock, make_source, make_generator):
        source = getattr(context, make_source)()
        generator = make_generator(context)

        source.add_generator(generator)
        assert mock.generators_of(source.handle.value) == [generator.handle.value]

        source.remove_generator(generator)
        assert mock.generators_of(source.handle.value) == []

    def test_second_remove_fails(self, engine, mock):
        """guard → context → DirectSource + BufferGenerator → add → remove → remove."""
        context = engine.new_context()
        source = context.new_direct_source()
        generator = context.new_buffer_generator()

        source.add_generator(generator)
        source.remove_generator(generator)

        with pytest.raises(SynthizerError) as exc_info:
            source.remove_generator(generator)

        assert exc_info.value.code == MockErrorCode.NOT_PRESENT

    def test_stale_generator_rejected_by_engine(self, context, mock):
        source = context.new_direct_source()
        generator = context.new_buffer_generator()
        mock.fail_next("syz_sourceAddGenerator", MockErrorCode.INVALID_HANDLE)

        with pytest.raises(SynthizerError) as exc_info:
            source.add_generator(generator)

        assert exc_info.value.code == MockErrorCode.INVALID_HANDLE

    def test_source_is_not_a_generator(self, context):
        source = context.new_direct_source()
        other = context.new_direct_source()

        with pytest.raises(SynthizerError) as exc_info:
            source.add_generator(other)

        assert exc_info.value.code == MockErrorCode.INVALID_HANDLE

    def test_structural_generator(self, context, mock):
        """Anything exposing a generator handle can be added."""
        generator = context.new_noise_generator()

        class Wrapped:
            def __init__(self, inner):
                self.inner = inner

            @property
            def handle(self):
                return self.inner.handle

        wrapped = Wrapped(generator)
        assert isinstance(wrapped, Generator)

        source = context.new_direct_source()
        source.add_generator(wrapped)
        assert mock.generators_of(source.handle.value) == [generator.handle.value]

    def test_closed_generator_refused(self, context, mock):
        from synthizer_safe import HandleReleasedError

        source = context.new_direct_source()
        generator = context.new_buffer_generator()
        generator.close()
        mock.reset_calls()

        with pytest.raises(HandleReleasedError):
            source.add_generator(generator)
        assert mock.calls == []


class TestSourceGain:
    """The gain default lives once on Source."""

    @pytest.mark.parametrize("make_source", ["new_direct_source", "new_panned_source", "new_source3d"])
    def test_gain(self, context, mock, make_source):
        source = getattr(context, make_source)()
        source.gain = 0.5

        assert source.gain == 0.5
        assert mock.last_call.function == "syz_getD"
