import base64
from datetime import timezone

from app.intake.models import (
    EncodedImage,
    PersistedRecord,
    PipelineState,
    PipelineStatus,
    UploadedAsset,
)


def _make_asset(data: bytes = b"\xff\xd8abc") -> UploadedAsset:
    return UploadedAsset(filename="photo.jpg", media_type="image/jpeg", data=data)


class TestEncodedImage:
    def test_from_asset_encodes_base64(self) -> None:
        image = EncodedImage.from_asset(_make_asset(b"hello"))
        assert image.media_type == "image/jpeg"
        assert image.payload == base64.b64encode(b"hello").decode("ascii")

    def test_data_url_carries_media_type_prefix(self) -> None:
        image = EncodedImage.from_asset(_make_asset(b"hello"))
        assert image.data_url == "data:image/jpeg;base64,aGVsbG8="

    def test_encoding_is_deterministic(self) -> None:
        asset = _make_asset()
        assert EncodedImage.from_asset(asset) == EncodedImage.from_asset(asset)


class TestPersistedRecord:
    def test_defaults_processed_at_to_utc_now(self) -> None:
        record = PersistedRecord(image_url="u", analysis="a")
        assert record.processed_at.tzinfo == timezone.utc


class TestPipelineState:
    def test_initial_state_is_idle_and_not_loading(self) -> None:
        state = PipelineState()
        assert state.status is PipelineStatus.IDLE
        assert state.loading is False

    def test_in_flight_states_are_loading(self) -> None:
        image = EncodedImage(media_type="image/jpeg", payload="AA==")
        reading = PipelineState().reading()
        analyzing = reading.analyzing(image)
        persisting = analyzing.persisting("analysis")
        assert [s.loading for s in (reading, analyzing, persisting)] == [True, True, True]
        assert persisting.image == image
        assert persisting.analysis == "analysis"

    def test_succeeded_keeps_result(self) -> None:
        state = PipelineState().reading().persisting("analysis").succeeded()
        assert state.status is PipelineStatus.SUCCEEDED
        assert state.analysis == "analysis"
        assert state.error is None
        assert state.loading is False

    def test_failed_drops_partial_result(self) -> None:
        state = PipelineState().reading().persisting("analysis").failed("boom")
        assert state.status is PipelineStatus.FAILED
        assert state.analysis is None
        assert state.error == "boom"

    def test_reading_clears_previous_run(self) -> None:
        failed = PipelineState().reading().failed("boom")
        state = failed.reading()
        assert state == PipelineState(status=PipelineStatus.READING)

    def test_transitions_do_not_mutate(self) -> None:
        state = PipelineState()
        state.reading()
        assert state.status is PipelineStatus.IDLE
