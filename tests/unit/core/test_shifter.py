"""Unit tests for the timing shifter."""

import pytest

from srtshift.core.errors import (
    InvalidParameterError,
    MalformedTimecodeError,
    MissingInputError,
    OutOfRangeTimecodeError,
)
from srtshift.core.shifter import (
    ShiftResult,
    format_status_message,
    last_subtitle_index,
    shift_subtitles,
    shift_timings,
)
from srtshift.core.timecode import NegativeTimePolicy


def _timing_lines(content: str) -> list[str]:
    return [line for line in content.split("\n") if " --> " in line]


@pytest.mark.unit
class TestLastSubtitleIndex:
    def test_sequential_file(self, sample_srt_content):
        assert last_subtitle_index(sample_srt_content) == 3

    def test_returns_label_not_count(self, renumbered_srt_content):
        assert last_subtitle_index(renumbered_srt_content) == 20

    def test_no_index_lines(self):
        assert last_subtitle_index("just text\nmore text\n") == 0
        assert last_subtitle_index("") == 0

    def test_crlf_file(self):
        content = "1\r\n00:00:01,000 --> 00:00:02,000\r\nHi\r\n"

        assert last_subtitle_index(content) == 1

    def test_lone_cr_file(self):
        content = "1\r00:00:01,000 --> 00:00:02,000\rHi\r\r2\r"

        assert last_subtitle_index(content) == 2


@pytest.mark.unit
class TestShiftTimings:
    def test_literal_example(self):
        content = (
            "1\n00:00:01,000 --> 00:00:02,000\nHi\n\n"
            "2\n00:00:10,000 --> 00:00:12,500\nHello"
        )

        result = shift_timings(content, 2, 2, 5)

        assert result == (
            "1\n00:00:01,000 --> 00:00:02,000\nHi\n\n"
            "2\n00:00:15,000 --> 00:00:17,500\nHello"
        )

    def test_lone_block_is_counted_not_matched_by_label(self):
        # The only block is labelled "2" but it is subtitle number 1
        content = "2\n00:00:10,000 --> 00:00:12,500\nHello"

        assert shift_timings(content, 2, 2, 5) == content
        assert shift_timings(content, 1, 1, 5) == (
            "2\n00:00:15,000 --> 00:00:17,500\nHello"
        )

    def test_zero_shift_is_identity(self, sample_srt_content):
        assert shift_timings(sample_srt_content, 1, 3, 0) == sample_srt_content

    def test_full_range_shift(self, sample_srt_content):
        result = shift_timings(sample_srt_content, 1, 3, 1.5)

        assert _timing_lines(result) == [
            "00:00:02,500 --> 00:00:05,500",
            "00:00:06,500 --> 00:00:09,500",
            "00:00:10,500 --> 00:00:13,500",
        ]

    def test_negative_full_range_shift(self, sample_srt_content):
        result = shift_timings(sample_srt_content, 1, 3, -0.25)

        assert _timing_lines(result) == [
            "00:00:00,750 --> 00:00:03,750",
            "00:00:04,750 --> 00:00:07,750",
            "00:00:08,750 --> 00:00:11,750",
        ]

    def test_single_entry_range(self, sample_srt_content):
        result = shift_timings(sample_srt_content, 2, 2, 10)

        assert _timing_lines(result) == [
            "00:00:01,000 --> 00:00:04,000",
            "00:00:15,000 --> 00:00:18,000",
            "00:00:09,000 --> 00:00:12,000",
        ]

    def test_non_timing_lines_are_untouched(self, sample_srt_content):
        original = sample_srt_content.split("\n")
        result = shift_timings(sample_srt_content, 1, 3, 42).split("\n")

        assert len(result) == len(original)
        for before, after in zip(original, result, strict=True):
            if " --> " not in before:
                assert after == before

    def test_end_index_defaults_to_last_label(self, sample_srt_content):
        result = shift_timings(sample_srt_content, 1, shift_seconds=1)

        assert _timing_lines(result) == [
            "00:00:02,000 --> 00:00:05,000",
            "00:00:06,000 --> 00:00:09,000",
            "00:00:10,000 --> 00:00:13,000",
        ]

    def test_start_index_zero_includes_everything(self, sample_srt_content):
        assert shift_timings(sample_srt_content, 0, 3, 1) == shift_timings(
            sample_srt_content, 1, 3, 1
        )

    def test_range_past_end_shifts_nothing(self, sample_srt_content):
        assert shift_timings(sample_srt_content, 4, 10, 1) == sample_srt_content

    def test_inverted_range_shifts_nothing(self, sample_srt_content):
        assert shift_timings(sample_srt_content, 3, 1, 1) == sample_srt_content

    def test_range_uses_running_count_not_labels(self, renumbered_srt_content):
        # Second entry is labelled "20" but it is subtitle number 2
        result = shift_timings(renumbered_srt_content, 2, 2, 1)

        assert _timing_lines(result) == [
            "00:00:01,000 --> 00:00:02,000",
            "00:00:04,000 --> 00:00:05,000",
        ]

    def test_auto_end_index_divergence_on_renumbered_file(self):
        # Known inconsistency: the auto end index is the last label (2) while
        # the range compares against the running count, which reaches 3.
        content = (
            "1\n00:00:01,000 --> 00:00:02,000\nA\n\n"
            "1\n00:00:03,000 --> 00:00:04,000\nB\n\n"
            "2\n00:00:05,000 --> 00:00:06,000\nC\n"
        )

        result = shift_timings(content, 1, shift_seconds=1)

        assert _timing_lines(result) == [
            "00:00:02,000 --> 00:00:03,000",
            "00:00:04,000 --> 00:00:05,000",
            "00:00:05,000 --> 00:00:06,000",
        ]

    def test_index_lines_are_never_rewritten(self):
        content = "007\n00:00:01,000 --> 00:00:02,000\nBond"

        result = shift_timings(content, 1, 1, 1)

        assert result.split("\n")[0] == "007"

    def test_timing_lines_before_first_index(self):
        content = "00:00:01,000 --> 00:00:02,000\n1\n00:00:03,000 --> 00:00:04,000"

        assert _timing_lines(shift_timings(content, 1, 1, 1)) == [
            "00:00:01,000 --> 00:00:02,000",
            "00:00:04,000 --> 00:00:05,000",
        ]
        assert _timing_lines(shift_timings(content, 0, 1, 1)) == [
            "00:00:02,000 --> 00:00:03,000",
            "00:00:04,000 --> 00:00:05,000",
        ]

    def test_trailing_newlines_preserved(self, sample_srt_content):
        content = sample_srt_content + "\n\n"

        result = shift_timings(content, 1, 3, 1)

        assert result.endswith("And this is the third one.\n\n\n")

    def test_crlf_line_endings_restored(self):
        content = "1\r\n00:00:01,000 --> 00:00:02,000\r\nHi\r\n"

        result = shift_timings(content, 1, 1, 1)

        assert result == "1\r\n00:00:02,000 --> 00:00:03,000\r\nHi\r\n"

    def test_crlf_tolerated_without_universal_newlines(self):
        content = "1\r\n00:00:01,000 --> 00:00:02,000\r\nHi\r\n"

        result = shift_timings(content, 1, 1, 1, universal_newlines=False)

        assert result == "1\r\n00:00:02,000 --> 00:00:03,000\r\nHi\r\n"

    @pytest.mark.parametrize(
        "content",
        [
            "1\r00:00:01,000 --> 00:00:02,000\rHi\r\r"
            "2\r00:00:03,000 --> 00:00:04,000\r",
            "1\n00:00:01,000 --> 00:00:02,000\r\nHi\n\r\n2\r\n00:00:03,000"
            " --> 00:00:04,000\nBye\r\n",
        ],
    )
    def test_zero_shift_round_trips_cr_and_mixed_endings(self, content):
        assert shift_timings(content, 1, 2, 0) == content

    def test_lone_cr_endings_kept(self):
        content = "1\r00:00:01,000 --> 00:00:02,000\rHi\r"

        result = shift_timings(content, 1, 1, 1)

        assert result == "1\r00:00:02,000 --> 00:00:03,000\rHi\r"

    def test_mixed_endings_kept_per_line(self):
        content = (
            "1\n00:00:01,000 --> 00:00:02,000\r\nHi\n\r\n"
            "2\r\n00:00:03,000 --> 00:00:04,000\nBye\r"
        )

        result = shift_timings(content, 1, 2, 1)

        assert result == (
            "1\n00:00:02,000 --> 00:00:03,000\r\nHi\n\r\n"
            "2\r\n00:00:04,000 --> 00:00:05,000\nBye\r"
        )

    def test_rollover_in_file(self):
        content = "1\n00:00:59,800 --> 00:59:59,999\nText"

        result = shift_timings(content, 1, 1, 1.0)

        assert _timing_lines(result) == ["00:01:00,800 --> 01:00:00,999"]

    def test_malformed_in_range_timing_line_raises_error(self):
        content = "1\n00:00:01,000 --> 00:00:02,000\nA\n\n2\n00:00:03 --> 00:00:04\nB"

        with pytest.raises(MalformedTimecodeError) as exc_info:
            shift_timings(content, 1, 2, 1)

        assert exc_info.value.line_number == 6

    def test_malformed_out_of_range_timing_line_passes_through(self):
        content = "1\n00:00:01,000 --> 00:00:02,000\nA\n\n2\n00:00:03 --> 00:00:04\nB"

        result = shift_timings(content, 1, 1, 1)

        assert result.split("\n")[5] == "00:00:03 --> 00:00:04"

    def test_negative_result_rejected_with_line_number(self, sample_srt_content):
        with pytest.raises(OutOfRangeTimecodeError, match="Line 2: ") as exc_info:
            shift_timings(sample_srt_content, 1, 3, -2)

        assert exc_info.value.timecode == "00:00:01,000"
        assert exc_info.value.shift_ms == -2000

    def test_negative_result_clamped(self, sample_srt_content):
        result = shift_timings(
            sample_srt_content, 1, 1, -2, policy=NegativeTimePolicy.CLAMP
        )

        assert _timing_lines(result)[0] == "00:00:00,000 --> 00:00:02,000"

    def test_non_finite_shift_raises_error(self, sample_srt_content):
        with pytest.raises(InvalidParameterError):
            shift_timings(sample_srt_content, 1, 3, float("nan"))

    def test_overflowing_shift_raises_error(self, sample_srt_content):
        with pytest.raises(InvalidParameterError, match="out of range"):
            shift_timings(sample_srt_content, 1, 3, 1e308)


@pytest.mark.unit
class TestShiftSubtitles:
    def test_defaults_cover_whole_file(self, sample_srt_content):
        result = shift_subtitles(sample_srt_content, shift_seconds=2)

        assert isinstance(result, ShiftResult)
        assert result.start_index == 0
        assert result.end_index == 3
        assert result.shifted_count == 3
        assert result.content == shift_timings(sample_srt_content, 1, 3, 2)

    def test_explicit_range(self, sample_srt_content):
        result = shift_subtitles(sample_srt_content, 2, 3, -1)

        assert result.start_index == 2
        assert result.end_index == 3
        assert result.shifted_count == 2
        assert result.message == (
            "Subtitles from index 2 to 3 have been shifted by -1 seconds."
        )

    def test_zero_shift_still_counts_rewritten_lines(self, sample_srt_content):
        result = shift_subtitles(sample_srt_content, 1, 1, 0)

        assert result.content == sample_srt_content
        assert result.shifted_count == 1

    def test_empty_content_raises_error(self):
        with pytest.raises(MissingInputError):
            shift_subtitles("", 1, 1, 1)


@pytest.mark.unit
class TestFormatStatusMessage:
    def test_whole_seconds(self):
        assert format_status_message(1, 3, 5.0) == (
            "Subtitles from index 1 to 3 have been shifted by 5 seconds."
        )

    def test_fractional_seconds(self):
        assert format_status_message(4, 9, -0.7) == (
            "Subtitles from index 4 to 9 have been shifted by -0.7 seconds."
        )
