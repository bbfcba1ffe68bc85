from textual_autocomplete import DropdownItem, TargetState

from countrypick.domain.types import DropdownState, SessionState
from countrypick.presentation.completion import SuggestionCompletionStrategy


def target(text: str) -> TargetState:
    return TargetState(text=text, cursor_position=len(text))


def test_serves_suggestions_in_session_order():
    state = SessionState(query="ch", suggestions=("Chad", "Chile", "China"), dropdown=DropdownState.EXPANDED)
    strategy = SuggestionCompletionStrategy(lambda: state)

    candidates = strategy(target("ch"))

    assert [item.value for item in candidates] == ["Chad", "Chile", "China"]
    assert all(isinstance(item, DropdownItem) for item in candidates)


def test_collapsed_state_offers_nothing():
    state = SessionState(query="ch", suggestions=("Chad",), dropdown=DropdownState.COLLAPSED)
    strategy = SuggestionCompletionStrategy(lambda: state)

    assert strategy(target("ch")) == []


def test_expanded_but_empty_offers_nothing():
    state = SessionState(query="Chad", suggestions=(), dropdown=DropdownState.EXPANDED)
    strategy = SuggestionCompletionStrategy(lambda: state)

    assert strategy(target("Chad")) == []


def test_reads_latest_state_on_every_call():
    states = [
        SessionState(query="c", suggestions=("Canada", "Chad"), dropdown=DropdownState.EXPANDED),
        SessionState(query="ca", suggestions=("Canada",), dropdown=DropdownState.EXPANDED),
    ]
    strategy = SuggestionCompletionStrategy(lambda: states[0])

    assert len(strategy(target("c"))) == 2
    states.pop(0)
    assert [item.value for item in strategy(target("ca"))] == ["Canada"]
