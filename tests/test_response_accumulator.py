import pytest

from weather_app.services.response_accumulator import REJECTED, ResponseAccumulator


class TestResponseAccumulator:
    """Test cases for the ResponseAccumulator class."""

    def test_new_accumulator_is_empty_and_terminated(self):
        accumulator = ResponseAccumulator()

        assert accumulator.size == 0
        assert accumulator.content == b""
        assert accumulator.raw == b"\0"
        assert accumulator.released is False

    @pytest.mark.parametrize(
        "chunks",
        [
            [b'{"current":', b' {"temperature_2m": 1.5}}'],
            [b"a"] * 100,
            [b"", b"abc", b"", b"\0def"],
            [bytes(range(256)) * 64, b"tail"],
        ],
    )
    def test_content_is_concatenation_of_chunks(self, chunks):
        """Test that content equals the chunks joined in order and stays terminated."""
        accumulator = ResponseAccumulator()

        for chunk in chunks:
            assert accumulator.append(chunk) == len(chunk)
            assert accumulator.raw.endswith(b"\0")

        assert accumulator.content == b"".join(chunks)
        assert accumulator.raw == b"".join(chunks) + b"\0"
        assert accumulator.size == sum(len(chunk) for chunk in chunks)

    def test_on_chunk_receives_each_chunk_size(self):
        sizes = []
        accumulator = ResponseAccumulator(on_chunk=sizes.append)

        accumulator.append(b"12345")
        accumulator.append(b"678")

        assert sizes == [5, 3]
        assert accumulator.content == b"12345678"

    def test_take_hands_off_content_and_releases(self):
        accumulator = ResponseAccumulator()
        accumulator.append(b"hello")

        body = accumulator.take()

        assert body == b"hello"
        assert isinstance(body, bytes)
        assert accumulator.released is True
        assert accumulator.size == 0

    def test_append_after_release_is_rejected(self):
        accumulator = ResponseAccumulator()
        accumulator.release()

        assert accumulator.append(b"late") == REJECTED
        assert accumulator.content == b""

    def test_context_manager_releases_on_exit(self):
        with ResponseAccumulator() as accumulator:
            accumulator.append(b"partial")

        assert accumulator.released is True

    def test_context_manager_releases_on_error(self):
        with pytest.raises(RuntimeError):
            with ResponseAccumulator() as accumulator:
                accumulator.append(b"partial")
                raise RuntimeError("transport failed")

        assert accumulator.released is True
        assert accumulator.raw == b""
