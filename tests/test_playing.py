from dataclasses import astuple

from hockeysim.playing import GameView, Skills, ViewStyle


def test_game_view_random_ranges():
    for _ in range(100):
        view = GameView.random()
        assert 1 <= view.scan <= 100
        assert 1 <= view.predicting <= 100
        assert 1 <= view.smart <= 100
        assert view.play in set(ViewStyle)


def test_game_view_random_covers_styles():
    styles = {GameView.random().play for _ in range(300)}
    assert styles == set(ViewStyle)


def test_skills_random_ranges():
    for _ in range(100):
        skills = Skills.random()
        values = astuple(skills)
        assert len(values) == 12
        assert all(1 <= value <= 100 for value in values)


def test_skills_fields_are_settable():
    skills = Skills(1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12)
    skills.face_off = 55
    assert skills.face_off == 55
    assert skills.discipline == 12
    assert skills.shot_accuracy == 1


def test_game_view_construction():
    view = GameView(10, 20, 30, ViewStyle.SUPREME)
    assert (view.scan, view.predicting, view.smart) == (10, 20, 30)
    assert view.play is ViewStyle.SUPREME