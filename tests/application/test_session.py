import pytest

from countrypick.application.session import SuggestionSession
from countrypick.domain.events import EventBus, SessionStateChanged, SuggestionsComputed
from countrypick.domain.types import DropdownState


class StateLog:
    def __init__(self, bus: EventBus):
        self.events: list[SessionStateChanged] = []
        bus.subscribe(SessionStateChanged, self.events.append)

    @property
    def computed(self) -> list[SessionStateChanged]:
        return [event for event in self.events if isinstance(event.cause, SuggestionsComputed)]


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def session(pool, bus) -> SuggestionSession:
    return SuggestionSession(pool, locale="en_US", event_bus=bus, off_thread=False)


@pytest.mark.asyncio
async def test_start_expands_with_whole_pool(session, pool, bus):
    log = StateLog(bus)
    assert session.state.dropdown is DropdownState.COLLAPSED

    session.start()
    await session.wait_idle()

    assert session.state.expanded
    assert session.suggestions == tuple(pool)
    assert len(log.computed) == 1


@pytest.mark.asyncio
async def test_typing_filters_pool(session):
    session.start()
    session.update_query("ch")
    await session.wait_idle()

    assert session.query == "ch"
    assert session.suggestions == ("Chad", "Chile", "China")
    assert session.dropdown_visible


@pytest.mark.asyncio
async def test_fast_typing_applies_only_the_latest_query(pool, bus):
    session = SuggestionSession(pool, locale="en_US", event_bus=bus, debounce=0.01)
    log = StateLog(bus)

    session.start()
    for text in ("c", "ch", "chi"):
        session.update_query(text)
    await session.wait_idle()

    assert session.suggestions == ("China",)
    assert [event.state.query for event in log.computed] == ["chi"]


@pytest.mark.asyncio
async def test_exact_match_query_yields_empty_hidden_list(session):
    session.start()
    session.update_query("Canada")
    await session.wait_idle()

    assert session.suggestions == ()
    assert session.state.expanded
    assert not session.dropdown_visible


@pytest.mark.asyncio
async def test_select_sets_query_and_collapses(session):
    session.start()
    session.update_query("gu")
    await session.wait_idle()

    state = session.select("Guinea")

    assert state.query == "Guinea"
    assert state.dropdown is DropdownState.COLLAPSED

    # The new query is recomputed like any other change.
    await session.wait_idle()
    assert session.suggestions == ("Guinea-Bissau",)
    assert session.state.expanded


@pytest.mark.asyncio
async def test_unchanged_query_publishes_nothing(session, bus):
    session.start()
    session.update_query("ch")
    await session.wait_idle()
    log = StateLog(bus)

    session.update_query("ch")

    assert log.events == []


@pytest.mark.asyncio
async def test_dismiss_commit_and_toggle(session, bus):
    session.start()
    await session.wait_idle()
    log = StateLog(bus)

    session.dismiss()
    assert session.state.dropdown is DropdownState.COLLAPSED

    session.toggle()
    assert session.state.dropdown is DropdownState.EXPANDED

    session.commit()
    assert session.state.dropdown is DropdownState.COLLAPSED

    assert [type(event.cause).__name__ for event in log.events] == [
        "DropdownDismissed",
        "DropdownToggled",
        "InputCommitted",
    ]
    assert log.events[0].previous.expanded


@pytest.mark.asyncio
async def test_stop_discards_pending_recompute(pool):
    session = SuggestionSession(pool, debounce=1.0)

    session.update_query("ch")
    await session.stop()

    assert session.state.is_stale
    assert session.suggestions == tuple(pool)
