"""Tests for Handle ownership and release."""

import copy
import gc
import threading

import pytest

from synthizer_safe import Handle, HandleReleasedError, SynthizerError
from synthizer_safe.errors import FatalNativeError, SynthizerSafeError
from synthizer_safe.testing import MockErrorCode


class TestEmptyHandle:
    """Tests for handles that were never bound."""

    def test_empty_has_value_zero(self, engine):
        handle = Handle.empty(engine)
        assert handle.value == 0
        assert not handle.bound

    def test_release_of_empty_does_not_reach_engine(self, engine, mock):
        handle = Handle.empty(engine)
        handle.release()

        assert mock.calls_to("syz_handleFree") == []

    def test_failed_create_leaves_nothing_to_free(self, engine, mock):
        mock.fail_next("syz_createContext", MockErrorCode.INVALID_ARGUMENT)

        with pytest.raises(SynthizerError) as exc_info:
            engine.new_context()

        assert exc_info.value.code == MockErrorCode.INVALID_ARGUMENT
        assert engine.live_handles == 0
        assert mock.calls_to("syz_handleFree") == []

    def test_bind_requires_a_value(self, engine):
        handle = Handle.empty(engine)
        with pytest.raises(SynthizerSafeError):
            handle.bind()

    def test_out_param_refused_once_bound(self, context):
        with pytest.raises(SynthizerSafeError):
            context.handle.out_param()


class TestRelease:
    """Tests for exactly-once release."""

    def test_release_frees_once(self, context, mock):
        value = context.handle.value

        context.close()
        context.close()
        context.handle.release()

        assert mock.free_calls[value] == 1
        assert mock.refcount(value) == 0

    def test_value_unavailable_after_release(self, context):
        context.close()

        with pytest.raises(HandleReleasedError):
            context.handle.value

    def test_accessor_on_closed_entity_never_reaches_engine(self, context, mock):
        source = context.new_direct_source()
        source.close()
        mock.reset_calls()

        with pytest.raises(HandleReleasedError):
            source.gain = 0.5

        assert mock.calls == []

    def test_garbage_collection_releases(self, context, mock):
        source = context.new_direct_source()
        value = source.handle.value

        del source
        gc.collect()

        assert mock.free_calls[value] == 1
        assert mock.kind_of(value) is None

    def test_racing_releases_free_once(self, context, mock):
        sources = [context.new_direct_source() for _ in range(20)]
        values = [s.handle.value for s in sources]
        barrier = threading.Barrier(4)

        def release_all():
            barrier.wait()
            for source in sources:
                source.close()

        threads = [threading.Thread(target=release_all) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        for value in values:
            assert mock.free_calls[value] == 1

    def test_failed_free_is_fatal(self, context, mock):
        value = context.handle.value
        mock.fail_next("syz_handleFree", MockErrorCode.INVALID_HANDLE)

        with pytest.raises(FatalNativeError) as exc_info:
            context.close()

        assert exc_info.value.code == MockErrorCode.INVALID_HANDLE
        assert exc_info.value.details["handle"] == value

    def test_fatal_free_not_caught_as_failure(self, context, mock):
        mock.fail_next("syz_handleFree")

        with pytest.raises(FatalNativeError):
            try:
                context.close()
            except SynthizerError:
                pytest.fail("fatal release was reported as a recoverable failure")

    def test_released_handle_untracked(self, engine, context):
        assert engine.live_handles == 1
        context.close()
        assert engine.live_handles == 0


class TestCopy:
    """Handles cannot be duplicated behind the engine's back."""

    def test_copy_refused(self, context):
        with pytest.raises(TypeError):
            copy.copy(context.handle)

    def test_deepcopy_refused(self, context):
        with pytest.raises(TypeError):
            copy.deepcopy(context.handle)

    def test_repr_shows_state(self, engine, context):
        assert "bound" in repr(context.handle)
        context.close()
        assert "released" in repr(context.handle)
        assert "empty" in repr(Handle.empty(engine))
