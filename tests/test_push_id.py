"""Unit tests for push ID generation."""

import itertools
import sys

import pytest
from core.errors import InvalidEncodingError
from encoding.alphabets import resolve
from encoding.timestamp import encode_timestamp, decode_timestamp
from generation.push_id import (
    UID_LENGTH,
    PushID,
    SafeIterator,
    generator,
    is_push_id,
    next_id,
    safe_generator,
)
from generation.validation import is_uid


class TestPushID:
    """Tests for the PushID object."""

    def test_default_encoding(self):
        """Omitted encoding selects base64url."""
        assert PushID().encoding == "base64url"

    def test_explicit_encoding(self):
        """Encoding is kept."""
        assert PushID("base58").encoding == "base58"

    @pytest.mark.parametrize("encoding", ["base32", "", 62])
    def test_invalid_encoding_at_construction(self, encoding):
        """Unknown encoding fails in the constructor."""
        with pytest.raises(InvalidEncodingError):
            PushID(encoding)

    def test_timestamp_unset_before_first_call(self):
        """timestamp is None until generate() runs."""
        assert PushID().timestamp is None

    def test_generate_shape(self, alphabet, clock):
        """ID is 20 chars: encoded clock + 12 suffix chars."""
        uid = PushID(alphabet.name).generate()
        assert len(uid) == UID_LENGTH
        assert uid[:8] == encode_timestamp(clock.now, alphabet.name)
        assert all(char in alphabet for char in uid)

    def test_timestamp_tracks_clock(self, clock):
        """timestamp is the last millisecond used."""
        push_id = PushID()
        push_id.generate()
        assert push_id.timestamp == clock.now
        clock.advance(5)
        push_id.generate()
        assert push_id.timestamp == clock.now

    def test_same_millisecond_increments(self, alphabet, clock, suffix_value):
        """Within one millisecond the suffix grows by one per call."""
        push_id = PushID(alphabet.name)
        ids = [push_id.generate() for _ in range(100)]
        assert len({uid[:8] for uid in ids}) == 1
        values = [suffix_value(uid, alphabet) for uid in ids]
        # Random seed could sit right at the top of the suffix space
        if values[0] + 99 < alphabet.radix ** 12:
            assert values == list(range(values[0], values[0] + 100))
            assert ids == sorted(ids)

    def test_rollover_reseeds(self, clock, fixed_random):
        """A new millisecond gives a new prefix and a fresh suffix."""
        push_id = PushID()
        first = push_id.generate()
        second = push_id.generate()
        assert first[8:] == "-" * 12
        assert second[8:] == "-" * 11 + "0"

        clock.advance()
        fixed_random["digit"] = 20
        third = push_id.generate()
        assert third[:8] == encode_timestamp(clock.now)
        assert third[:8] > second[:8]
        assert third[8:] == "J" * 12

    def test_clock_backwards_reseeds(self, clock, fixed_random):
        """Any change of millisecond, even backwards, reseeds."""
        push_id = PushID()
        push_id.generate()
        push_id.generate()
        clock.advance(-3)
        uid = push_id.generate()
        assert decode_timestamp(uid) == clock.now
        assert uid[8:] == "-" * 12

    def test_sorted_across_milliseconds(self, clock):
        """IDs sort in generation order as the clock moves."""
        push_id = PushID()
        ids = []
        for _ in range(20):
            ids.extend(push_id.generate() for _ in range(3))
            clock.advance()
        assert ids == sorted(ids)
        assert len(set(ids)) == len(ids)

    def test_exhaustion_wraps_silently(self, clock):
        """Exhausted suffix wraps instead of raising."""
        push_id = PushID("base36")
        push_id.generate()
        push_id._state.suffix._digits = [35] * 12
        uid = push_id.generate()
        assert uid[8:] == "000000000001"

    def test_iteration(self, clock):
        """Iterating a PushID yields IDs forever."""
        push_id = PushID()
        ids = list(itertools.islice(push_id, 10))
        assert len(set(ids)) == 10
        assert push_id.timestamp == clock.now

    def test_iteration_shares_state(self, clock, suffix_value):
        """generate() and iteration continue the same counter."""
        push_id = PushID()
        alphabet = resolve("base64url")
        first = push_id.generate()
        second = next(iter(push_id))
        if suffix_value(first, alphabet) + 1 < 64 ** 12:
            assert suffix_value(second, alphabet) == suffix_value(first, alphabet) + 1

    def test_instances_independent(self, clock, fixed_random):
        """State is never shared between instances."""
        a = PushID()
        b = PushID()
        a.generate()
        a.generate()
        assert b.generate()[8:] == "-" * 12

    def test_repr(self):
        """repr shows encoding."""
        assert "base62" in repr(PushID("base62"))


class TestGenerator:
    """Tests for generator() and safe_generator()."""

    def test_generator_yields_ids(self, alphabet):
        """generator() yields valid IDs."""
        for uid in itertools.islice(generator(alphabet.name), 25):
            assert is_uid(uid, alphabet.name)

    def test_generator_default_encoding(self):
        """Default encoding is base64url."""
        uid = next(generator())
        assert is_uid(uid)

    def test_generator_validates_eagerly(self):
        """Unknown encoding fails before the first next()."""
        with pytest.raises(InvalidEncodingError):
            generator("base16")

    def test_generator_matches_push_id(self, clock, fixed_random):
        """Sequence and object share one step function."""
        from_object = PushID("base62")
        from_sequence = generator("base62")
        for _ in range(5):
            assert next(from_sequence) == from_object.generate()

    def test_generator_increments(self, clock, suffix_value):
        """Same-millisecond calls increase the suffix."""
        alphabet = resolve("base58")
        ids = list(itertools.islice(generator("base58"), 50))
        values = [suffix_value(uid, alphabet) for uid in ids]
        if values[0] + 49 < 58 ** 12:
            assert values == sorted(values)
            assert len(set(values)) == 50

    def test_safe_generator_protocol(self):
        """Safe iterator exposes only iteration."""
        safe = safe_generator()
        assert isinstance(safe, SafeIterator)
        assert iter(safe) is safe
        assert is_uid(next(safe))
        for name in ("send", "throw", "close"):
            assert not hasattr(safe, name)

    def test_safe_generator_hides_sequence(self):
        """No attribute of the wrapper leads back to the raw generator."""
        safe = safe_generator()
        for name in SafeIterator.__slots__:
            attr = getattr(safe, name)
            assert not hasattr(attr, "__self__")
            assert not hasattr(attr, "send")
        assert is_uid(next(safe))

    def test_safe_generator_invalid_encoding(self):
        """Safe variant validates eagerly too."""
        with pytest.raises(InvalidEncodingError):
            safe_generator("nope")


class TestHelpers:
    """Tests for is_push_id() and next_id()."""

    def test_module_not_shadowed_by_export(self):
        """The package exports generator() without hiding the push_id module."""
        import generation

        assert generation.generator is generator
        assert generation.push_id is sys.modules["generation.push_id"]
        assert generation.push_id.now_millis is not None

    def test_clock_patch_reaches_step(self, clock):
        """Patching the module clock drives every generator shape."""
        clock.now = 64
        assert PushID().generate()[:8] == "------0-"
        assert next(generator())[:8] == "------0-"
        assert next(safe_generator())[:8] == "------0-"

    def test_is_push_id(self):
        """Instance check."""
        assert is_push_id(PushID())
        assert not is_push_id(generator())
        assert not is_push_id("-" * 20)

    def test_next_id(self):
        """Default generator produces valid, increasing IDs."""
        first = next_id()
        second = next_id()
        assert is_uid(first)
        assert is_uid(second)
        assert first != second
