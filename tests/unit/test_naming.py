"""
Unit tests for recording file names.
"""

import pytest

from exerec.record.naming import MAX_SLUG_LENGTH, fnv1a_32, recording_name, slugify


class TestHash:
    """Unit tests for the FNV-1a hash."""

    def test_known_values(self):
        """Test published FNV-1a 32-bit test vectors."""
        assert fnv1a_32(b"") == 0x811C9DC5
        assert fnv1a_32(b"a") == 0xE40C292C
        assert fnv1a_32(b"foobar") == 0xBF9CF968

    def test_chunks_hash_like_their_concatenation(self):
        """Test that chunks are hashed as one byte sequence."""
        assert fnv1a_32(b"foo", b"bar") == fnv1a_32(b"foobar")


class TestSlug:
    """Unit tests for slugify."""

    def test_non_alphanumerics_are_dropped(self):
        """Test that punctuation and spaces are left out."""
        assert slugify(["-n", "hello world"]) == "nhelloworld"
        assert slugify(["--output=/tmp/x.txt", "a_b"]) == "outputtmpxtxtab"

    def test_truncated_to_max_length(self):
        """Test that long argument lists are cut to exactly 20 characters."""
        slug = slugify(["abcdefghij", "klmnopqrst", "uvwxyz"])

        assert slug == "abcdefghijklmnopqrst"
        assert len(slug) == MAX_SLUG_LENGTH == 20

    def test_punctuation_does_not_count_towards_length(self):
        """Test that dropped characters don't use up the limit."""
        slug = slugify(["-" * 30 + "abc"])
        assert slug == "abc"

    def test_empty(self):
        """Test arguments without any letter or digit."""
        assert slugify([]) == ""
        assert slugify(["--", "-"]) == ""

    def test_unicode_letters_are_kept(self):
        """Test that non-ASCII letters count as letters."""
        assert slugify(["café"]) == "café"


class TestRecordingName:
    """Unit tests for recording_name."""

    def test_format(self):
        """Test <command>-<slug>-<hash>."""
        name = recording_name("", "ls", ["-a"])
        command, slug, digest = name.split("-")

        assert command == "ls"
        assert slug == "a"
        assert len(digest) == 8
        int(digest, 16)

    def test_hash_covers_stdin_command_and_arguments(self):
        """Test the hash against known values."""
        assert recording_name("", "", []) == "--811c9dc5"
        assert recording_name("a", "", []) == "--e40c292c"
        assert recording_name("", "", ["a"]) == "-a-e40c292c"

    def test_hash_is_zero_padded(self):
        """Test that hashes always have 8 hex digits."""
        for i in range(200):
            assert len(recording_name(str(i), "cmd", []).rsplit("-", 1)[1]) == 8

    def test_deterministic(self):
        """Test that identical inputs give identical names."""
        first = recording_name("input\n", "base64", ["-d", "--wrap=0"])
        second = recording_name("input\n", "base64", ["-d", "--wrap=0"])
        assert first == second

    @pytest.mark.parametrize(
        "stdin,command,arguments",
        [
            ("other", "base64", ["-d"]),
            ("input", "base32", ["-d"]),
            ("input", "base64", ["-D"]),
            ("input", "base64", ["-d", "-i"]),
            ("input", "base64", []),
        ],
    )
    def test_any_change_changes_name(self, stdin, command, arguments):
        """Test that changing stdin, command or an argument changes the name."""
        assert recording_name(stdin, command, arguments) != recording_name("input", "base64", ["-d"])

    def test_argument_order_matters(self):
        """Test that the hash is order sensitive."""
        assert recording_name("", "cmd", ["a", "b"]) != recording_name("", "cmd", ["b", "a"])

    def test_slug_collision_is_resolved_by_hash(self):
        """Test arguments with the same slug get different names."""
        first = recording_name("", "echo", ["-n", "x"])
        second = recording_name("", "echo", ["n", "x"])

        assert first.rsplit("-", 1)[0] == second.rsplit("-", 1)[0]
        assert first != second

    def test_command_path_is_not_a_directory(self):
        """Test that a command given as a path doesn't nest the recording."""
        name = recording_name("", "/bin/ls", ["-a"])

        assert "/" not in name
        assert name.startswith("ls-a-")
        assert name != recording_name("", "ls", ["-a"])
