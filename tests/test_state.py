from blockmenu.state import GameContext, GameState, LoadState, MenuWidget


def test_menu_widget_values_follow_layout_order():
    assert [w.value for w in MenuWidget] == [1, 2, 3, 4, 5, 6]
    assert MenuWidget(3) is MenuWidget.SINGLEPLAYER
    assert MenuWidget(6) is MenuWidget.QUIT


def test_context_holds_every_game_state_in_order():
    held = [GameContext(state=state).state for state in GameState]
    assert [state.name for state in held] == [
        "MENU",
        "LOADING",
        "SP_GAMEPLAY",
        "MP_GAMEPLAY",
        "SETTINGS",
        "QUIT",
    ]


def test_context_holds_either_load_state():
    assert GameContext(load=LoadState.TRUE).load is LoadState.TRUE
    assert GameContext(load=LoadState.FALSE).load is LoadState.FALSE
    assert {GameContext(load=load).load for load in LoadState} == {
        LoadState.TRUE,
        LoadState.FALSE,
    }


def test_context_defaults_to_menu_and_not_loading():
    context = GameContext()
    assert context.state is GameState.MENU
    assert context.load is LoadState.FALSE


def test_context_is_shared_by_reference():
    context = GameContext()
    holder = [context, context]
    holder[0].state = GameState.LOADING
    assert holder[1].state is GameState.LOADING


def test_context_equality_by_fields():
    assert GameContext(GameState.QUIT) == GameContext(state=GameState.QUIT)
    assert GameContext(GameState.QUIT) != GameContext()