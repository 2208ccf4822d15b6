import pytest

from blockbreaker.config import GameConfig
from blockbreaker.controller import GameController, Outcome, Phase
from blockbreaker.render_model import RenderModel
from conftest import place_ball


@pytest.fixture
def controller():
    return GameController(GameConfig(rng_seed=1))


def test_starts_idle(controller):
    assert controller.phase is Phase.IDLE
    assert controller.outcome is Outcome.IN_PROGRESS
    assert not controller.running and not controller.over
    assert controller.score == 0 and controller.lives == 3
    assert controller.ticks == 0


def test_pointer_moves_paddle_and_resting_ball(controller):
    controller.on_pointer_move(123)
    assert controller.paddle.x == 123
    assert controller.ball.x == 123
    controller.on_pointer_move(-5)
    assert controller.paddle.x == 50


def test_click_starts_play(controller):
    controller.on_click()
    assert controller.phase is Phase.PLAYING
    result = controller.on_tick()
    assert result.advanced
    assert controller.ticks == 1
    controller.on_pointer_move(700)
    assert controller.ball.x != 700


def test_tick_while_idle_does_nothing(controller):
    before = controller.ball
    result = controller.on_tick()
    assert not result.advanced
    assert controller.ball == before
    assert controller.ticks == 0


def test_read_accessors_return_copies(controller):
    ball = controller.ball
    ball.x = -999
    blocks = controller.blocks
    blocks[0].active = False
    paddle = controller.paddle
    paddle.x = 0
    assert controller.ball.x == 400
    assert controller.blocks[0].active
    assert controller.paddle.x == 400


def test_life_lost_returns_to_idle(controller):
    controller.on_click()
    controller.on_pointer_move(100)
    place_ball(controller.simulation, 400, 606, 0, 5.0)
    result = controller.on_tick()
    assert result.life_lost
    assert controller.phase is Phase.IDLE
    assert controller.lives == 2
    assert controller.ball.x == controller.paddle.x == 100


def test_loss_then_replay():
    controller = GameController(GameConfig(rng_seed=1, initial_lives=1))
    controller.on_click()
    controller.on_pointer_move(100)
    controller.simulation.blocks[0].deactivate()
    controller.simulation.score = 10
    place_ball(controller.simulation, 400, 606, 0, 5.0)
    controller.on_tick()
    assert controller.phase is Phase.FINISHED
    assert controller.outcome is Outcome.LOSS
    assert not controller.running

    controller.on_click()
    assert controller.phase is Phase.PLAYING
    assert controller.outcome is Outcome.IN_PROGRESS
    assert controller.score == 0 and controller.lives == 1
    assert all(b.active for b in controller.blocks)


def test_win(controller):
    controller.on_click()
    sim = controller.simulation
    for block in sim.blocks[1:]:
        block.deactivate()
    sim.score = 440
    place_ball(sim, 60, 85, 0, -5.0)
    controller.on_tick()
    assert controller.phase is Phase.FINISHED
    assert controller.outcome is Outcome.WIN
    assert controller.score == 450


def test_reset(controller):
    controller.on_click()
    for _ in range(30):
        controller.on_tick()
    controller.reset()
    assert controller.phase is Phase.IDLE
    assert controller.ticks == 0
    assert (controller.ball.x, controller.ball.y) == (400, 550)


def test_render_model(controller):
    assert isinstance(controller.render_model(), RenderModel)
