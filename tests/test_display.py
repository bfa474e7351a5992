import pytest

from bogglegame.display import BoggleDisplay, Player, score_word


@pytest.fixture
def display():
    shown = BoggleDisplay()
    shown.draw_board(4, 4)
    return shown


def test_score_word_follows_length():
    assert score_word("word") == 1
    assert score_word("words") == 2
    assert score_word("abcdefgh") == score_word("abcdefg") + 1


def test_draw_board_rejects_bad_dimensions():
    shown = BoggleDisplay()
    with pytest.raises(ValueError):
        shown.draw_board(6, 4)
    with pytest.raises(ValueError):
        shown.draw_board(4, -1)


def test_draw_board_sets_dimensions(display):
    assert (display.num_rows, display.num_cols) == (4, 4)


def test_label_cube_out_of_range(display):
    with pytest.raises(IndexError):
        display.label_cube(4, 0, "A")
    with pytest.raises(IndexError):
        display.highlight_cube(0, -1, True)


def test_label_before_board_raises():
    with pytest.raises(IndexError):
        BoggleDisplay().label_cube(0, 0, "A")


def test_label_shows_in_render(display):
    display.label_cube(0, 3, "D")
    first_line = display.render().splitlines()[0]
    assert first_line.endswith("D")


def test_highlight_cube_marks_cell(display):
    display.label_cube(1, 1, "q")
    display.highlight_cube(1, 1, True)
    assert display.highlighted == {(1, 1)}
    assert "[Q]" in display.render()
    display.highlight_cube(1, 1, False)
    assert display.highlighted == frozenset()
    assert "[Q]" not in display.render()


def test_highlight_path_clears_afterwards(display):
    display.highlight_path([(0, 0), (0, 1), (1, 1)])
    assert display.highlighted == frozenset()


def test_highlight_path_out_of_range(display):
    with pytest.raises(IndexError):
        display.highlight_path([(0, 0), (9, 9)])


def test_record_word_updates_score_and_list(display):
    display.record_word_for_player("TRAIN", Player.HUMAN)
    display.record_word_for_player("rain", Player.HUMAN)
    assert display.words(Player.HUMAN) == ("train", "rain")
    assert display.score(Player.HUMAN) == score_word("train") + score_word("rain")
    assert display.score(Player.COMPUTER) == 0
    assert display.words(Player.COMPUTER) == ()


def test_record_word_invalid_player(display):
    with pytest.raises(ValueError):
        display.record_word_for_player("word", 7)


def test_draw_board_resets_scores(display):
    display.record_word_for_player("stone", Player.COMPUTER)
    display.draw_board(5, 5)
    assert display.score(Player.COMPUTER) == 0
    assert display.words(Player.COMPUTER) == ()


def test_render_lists_players(display):
    display.record_word_for_player("stone", Player.COMPUTER)
    text = display.render()
    assert "Me: 0" in text
    assert f"Computer: {score_word('stone')}" in text
    assert "stone" in text