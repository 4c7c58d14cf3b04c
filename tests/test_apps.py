import random
from decimal import Decimal

from animemoi.final_score_modal import FinalScoreModal
from animemoi.game import GameController
from animemoi.lunch_tray_app import LunchTrayApp
from animemoi.screens import LunchTrayScreen
from animemoi.unscramble_app import UnscrambleApp


async def test_lunch_tray_walkthrough():
    app = LunchTrayApp()
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.current_step is LunchTrayScreen.Start

        await pilot.press("enter")
        await pilot.pause()
        assert app.current_step is LunchTrayScreen.Entree

        await pilot.press("enter")
        assert app.order.state.entree.name == "Cauliflower"

        await pilot.press("n")
        await pilot.pause()
        assert app.current_step is LunchTrayScreen.SideDish

        await pilot.press("j", "enter")
        await pilot.pause()
        assert app.order.state.side_dish.name == "Butternut Squash Soup"

        await pilot.press("n")
        await pilot.pause()
        assert app.current_step is LunchTrayScreen.Accompaniment

        await pilot.press("n")
        await pilot.pause()
        assert app.current_step is LunchTrayScreen.Checkout
        assert app.order.state.accompaniment is None
        assert app.order.state.order_total == Decimal("10.80")

        await pilot.press("escape")
        await pilot.pause()
        assert app.current_step is LunchTrayScreen.Accompaniment

        await pilot.press("c")
        await pilot.pause()
        assert app.current_step is LunchTrayScreen.Start
        assert app.order.state.selected_items() == []


async def test_lunch_tray_submit_resets_order():
    app = LunchTrayApp()
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("enter")
        await pilot.pause()
        await pilot.press("enter", "n")
        await pilot.pause()
        await pilot.press("n")
        await pilot.pause()
        await pilot.press("n")
        await pilot.pause()
        assert app.current_step is LunchTrayScreen.Checkout

        await pilot.press("s")
        await pilot.pause()
        assert app.current_step is LunchTrayScreen.Start
        assert app.order.state.entree is None
        assert app.system_status.startswith("Order sent: 1 item(s)")


async def test_unscramble_round_trip_to_play_again():
    game = GameController(["cat", "dog", "pig"], max_words=2, rng=random.Random(4))
    app = UnscrambleApp(game)
    async with app.run_test() as pilot:
        await pilot.pause()

        await pilot.press(*game.current_word)
        assert game.user_guess == game.current_word
        await pilot.press("enter")
        await pilot.pause()
        assert game.state.score == 20
        assert game.state.current_word_count == 1

        await pilot.press("z", "z", "enter")
        await pilot.pause()
        assert game.state.is_guessed_word_wrong
        assert game.user_guess == "zz"

        await pilot.press("backspace", "backspace")
        assert game.user_guess == ""

        await pilot.press("ctrl+k")
        await pilot.pause()
        assert game.state.is_game_over
        assert isinstance(app.screen, FinalScoreModal)
        assert app.screen.score == 20

        await pilot.press("p")
        await pilot.pause()
        assert not isinstance(app.screen, FinalScoreModal)
        assert not game.state.is_game_over
        assert game.state.score == 0
        assert game.state.current_word_count == 0


async def test_unscramble_early_end_and_play_again_without_words(stuck_random):
    game = GameController(["cat", "dog", "pig"], max_words=3, rng=stuck_random)
    app = UnscrambleApp(game)
    async with app.run_test() as pilot:
        await pilot.pause()
        stuck_random.stuck = True

        await pilot.press("ctrl+k")
        await pilot.pause()
        assert game.state.is_game_over
        assert app.system_status.startswith("Game ended early")
        assert isinstance(app.screen, FinalScoreModal)
        assert app.screen.ended_early

        await pilot.press("p")
        await pilot.pause()
        assert not isinstance(app.screen, FinalScoreModal)
        assert game.state.is_game_over
        assert game.state.current_word_count == 1
        assert app.system_status.startswith("Game ended early")


async def test_unscramble_play_again_after_early_end_recovers(stuck_random):
    game = GameController(["cat", "dog", "pig"], max_words=3, rng=stuck_random)
    app = UnscrambleApp(game)
    async with app.run_test() as pilot:
        await pilot.pause()
        stuck_random.stuck = True
        await pilot.press("ctrl+k")
        await pilot.pause()

        stuck_random.stuck = False
        await pilot.press("p")
        await pilot.pause()
        assert not game.state.is_game_over
        assert game.state.current_word_count == 0
        assert app.system_status == ""


async def test_lunch_tray_screens_carry_routes():
    app = LunchTrayApp()
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.screen.name == "Start"

        await pilot.press("enter")
        await pilot.pause()
        assert app.screen.name == "Entree"
        assert app.current_step is LunchTrayScreen.from_route(app.screen.name)


async def test_menu_screen_follows_order_changes():
    app = LunchTrayApp()
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("enter")
        await pilot.pause()
        menu = app.screen
        assert menu.selected is None

        await pilot.press("j", "enter")
        await pilot.pause()
        assert menu.selected.name == "Three Bean Chili"

        app.order.update_entree(menu.options[3])
        assert menu.selected is menu.options[3]

        app.order.reset_order()
        assert menu.selected is None
