from .challenge import Challenge, generate_challenge


def test_answer_is_sum():
    for _ in range(500):
        challenge = generate_challenge()
        assert challenge.answer == challenge.a + challenge.b
        assert 1 <= challenge.a <= 10
        assert 1 <= challenge.b <= 10
        assert 2 <= challenge.answer <= 20


def test_covers_the_range():
    operands = set()
    for _ in range(2000):
        challenge = generate_challenge()
        operands.update([challenge.a, challenge.b])

    assert operands == set(range(1, 11))


def test_question():
    assert Challenge(3, 4).question == "3 + 4"
    assert Challenge(3, 4).answer == 7


def test_custom_bounds():
    challenge = generate_challenge(5, 5)
    assert challenge == Challenge(5, 5)


def test_bounds_from_config(config):
    config.read_dict({"verify": {"operand_min": 2, "operand_max": 2}})

    assert generate_challenge().answer == 4
