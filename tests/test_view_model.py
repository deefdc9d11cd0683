from countdown.core.engine import TimerEngine
from countdown.core.state import Idle, Running
from countdown.core.view_model import TimerViewModel


def test_relays_every_transition(qapp, scheduler) -> None:
    view_model = TimerViewModel(TimerEngine(scheduler))
    states: list = []
    running: list[bool] = []
    view_model.state_changed.connect(states.append)
    view_model.running_changed.connect(running.append)

    view_model.set_duration(2)
    assert view_model.can_start
    view_model.start()
    assert view_model.is_running
    assert not view_model.can_start
    scheduler.advance(2)

    assert states == [Idle(2), Running(2, 2), Running(2, 1), Idle(0)]
    assert running == [True, False]


def test_close_detaches_from_engine(qapp, scheduler) -> None:
    engine = TimerEngine(scheduler)
    view_model = TimerViewModel(engine)
    states: list = []
    view_model.state_changed.connect(states.append)

    view_model.close()
    engine.set_duration(4)

    assert states == []
    assert view_model.state == Idle(4)
