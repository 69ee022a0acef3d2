"""
Unit tests for PageDistributor scheduling.

Covers coalescing of edit bursts, the single-outstanding-pass policy,
the stale re-run option and failure handling.
"""

import pytest

from docpager.core.models import Document
from docpager.pagination import MeasurementError
from docpager.scheduling import GuardState, ImmediateTicker, ManualTicker, PageDistributor


class EditingMeasurer:
    """Measurer that fires an edit the first time it measures."""

    def __init__(self, height: float = 20.0) -> None:
        self.height = height
        self.on_first_measure = None
        self.calls = 0

    def measure(self, block_kind: str, plain_text: str) -> float:
        self.calls += 1
        if self.on_first_measure is not None:
            hook, self.on_first_measure = self.on_first_measure, None
            hook()
        return self.height


class SwitchableMeasurer:
    """Measurer that can be taken offline."""

    def __init__(self) -> None:
        self.available = True

    def measure(self, block_kind: str, plain_text: str) -> float:
        if not self.available:
            raise MeasurementError("measurement surface unavailable")
        return 100.0


@pytest.fixture
def ticker():
    return ManualTicker()


class TestInitialState:

    def test_placeholder_pages_before_first_pass(self, ticker, lookup_measurer):
        distributor = PageDistributor(lookup_measurer(), ticker)

        assert len(distributor.pages) == 1
        assert distributor.result.synthesized
        assert distributor.is_stale
        assert distributor.guard.state is GuardState.IDLE

    def test_default_document_is_single_empty_paragraph(self, ticker, lookup_measurer):
        distributor = PageDistributor(lookup_measurer(), ticker)
        assert len(distributor.document) == 1
        assert distributor.document.blocks[0].plain_text == ""


class TestDocumentChange:

    def test_change_when_idle_then_pass_deferred_to_tick(self, ticker, lookup_measurer, make_document):
        # Arrange
        measurer = lookup_measurer(default=300)
        distributor = PageDistributor(measurer, ticker)
        doc = make_document("a", "b", "c")

        # Act
        distributor.on_document_change(doc)

        # Assert: nothing measured until the tick
        assert distributor.is_running
        assert measurer.calls == []
        assert distributor.document is doc

        ticker.run_pending()

        assert not distributor.is_running
        assert [len(page.blocks) for page in distributor.pages] == [2, 1]
        assert distributor.result.blocks == doc.blocks
        assert not distributor.is_stale

    def test_burst_of_changes_coalesced_into_one_pass_over_latest(self, ticker, lookup_measurer, make_document):
        measurer = lookup_measurer()
        distributor = PageDistributor(measurer, ticker)
        docs = [make_document(*["x"] * n) for n in range(1, 6)]

        for doc in docs:
            distributor.on_document_change(doc)

        assert ticker.pending == 1
        ticker.run_pending()

        assert distributor.pass_count == 1
        assert distributor.result.blocks == docs[-1].blocks
        assert len(measurer.calls) == 5

    def test_request_pass_reports_whether_scheduled(self, ticker, lookup_measurer):
        distributor = PageDistributor(lookup_measurer(), ticker)

        assert distributor.request_pass() is True
        assert distributor.request_pass() is False
        ticker.run_pending()
        assert distributor.request_pass() is True

    def test_immediate_ticker_paginates_synchronously(self, lookup_measurer, make_document):
        distributor = PageDistributor(lookup_measurer(), ImmediateTicker())
        doc = make_document("a", "b")

        distributor.on_document_change(doc)

        assert distributor.result.blocks == doc.blocks
        assert not distributor.is_running


class TestEditDuringPass:
    """An edit that lands while a pass is running."""

    def _setup(self, rerun_on_stale, make_document):
        ticker = ManualTicker()
        measurer = EditingMeasurer()
        distributor = PageDistributor(measurer, ticker, rerun_on_stale=rerun_on_stale)
        first = make_document("first")
        second = make_document("second", "edit")
        measurer.on_first_measure = lambda: distributor.on_document_change(second)
        distributor.on_document_change(first)
        return ticker, distributor, first, second

    def test_edit_during_pass_updates_document_immediately(self, make_document):
        ticker, distributor, first, second = self._setup(False, make_document)

        ticker.run_pending()

        assert distributor.document is second
        assert distributor.revision == 2

    def test_without_rerun_then_pages_stay_stale(self, make_document):
        ticker, distributor, first, second = self._setup(False, make_document)

        ticker.run_pending()

        assert distributor.pass_count == 1
        assert ticker.pending == 0
        assert distributor.result.blocks == first.blocks
        assert distributor.is_stale

    def test_with_rerun_then_follow_up_pass_catches_up(self, make_document):
        ticker, distributor, first, second = self._setup(True, make_document)

        ticker.run_pending()

        assert distributor.result.blocks == first.blocks
        assert ticker.pending == 1

        ticker.run_pending()

        assert distributor.pass_count == 2
        assert distributor.result.blocks == second.blocks
        assert not distributor.is_stale

    def test_raising_subscriber_does_not_drop_follow_up_pass(self, make_document):
        ticker, distributor, first, second = self._setup(True, make_document)
        calls = []

        def listener(result):
            calls.append(result)
            if len(calls) == 1:
                raise RuntimeError("preview widget failed")

        distributor.subscribe(listener)

        with pytest.raises(RuntimeError):
            ticker.run_pending()

        assert distributor.result.blocks == first.blocks
        assert ticker.pending == 1

        ticker.run_pending()

        assert len(calls) == 2
        assert distributor.result.blocks == second.blocks
        assert not distributor.is_stale


class TestPassFailure:

    def test_failed_pass_keeps_previous_pages_and_returns_to_idle(self, ticker, make_document):
        # Arrange
        measurer = SwitchableMeasurer()
        distributor = PageDistributor(measurer, ticker)
        good = make_document("a", "b")
        distributor.on_document_change(good)
        ticker.run_pending()
        published = distributor.result

        # Act
        measurer.available = False
        distributor.on_document_change(make_document("c"))
        ticker.run_pending()

        # Assert
        assert distributor.result is published
        assert isinstance(distributor.last_error, MeasurementError)
        assert distributor.guard.state is GuardState.IDLE
        assert distributor.is_stale
        assert ticker.pending == 0

    def test_next_change_after_failure_retries(self, ticker, make_document):
        measurer = SwitchableMeasurer()
        distributor = PageDistributor(measurer, ticker)
        measurer.available = False
        distributor.on_document_change(make_document("a"))
        ticker.run_pending()

        measurer.available = True
        recovered = make_document("b")
        distributor.on_document_change(recovered)
        ticker.run_pending()

        assert distributor.last_error is None
        assert distributor.result.blocks == recovered.blocks

    def test_listeners_not_notified_on_failure(self, ticker, make_document):
        measurer = SwitchableMeasurer()
        measurer.available = False
        distributor = PageDistributor(measurer, ticker)
        seen = []
        distributor.subscribe(seen.append)

        distributor.on_document_change(make_document("a"))
        ticker.run_pending()

        assert seen == []


class TestSubscribers:

    def test_subscriber_receives_each_published_result(self, ticker, lookup_measurer, make_document):
        distributor = PageDistributor(lookup_measurer(), ticker)
        seen = []
        distributor.subscribe(seen.append)

        distributor.on_document_change(make_document("a"))
        ticker.run_pending()
        distributor.on_document_change(make_document("b"))
        ticker.run_pending()

        assert len(seen) == 2
        assert seen[-1] is distributor.result

    def test_unsubscribe_stops_notifications(self, ticker, lookup_measurer, make_document):
        distributor = PageDistributor(lookup_measurer(), ticker)
        seen = []
        unsubscribe = distributor.subscribe(seen.append)

        unsubscribe()
        distributor.on_document_change(make_document("a"))
        ticker.run_pending()

        assert seen == []
        unsubscribe()  # idempotent

    def test_subscriber_sees_guard_idle(self, ticker, lookup_measurer, make_document):
        distributor = PageDistributor(lookup_measurer(), ticker)
        states = []
        distributor.subscribe(lambda result: states.append(distributor.guard.state))

        distributor.on_document_change(make_document("a"))
        ticker.run_pending()

        assert states == [GuardState.IDLE]
