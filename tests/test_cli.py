from bowling_app.cli import run


def scripted(*answers: str):
    remaining = list(answers)
    prompts: list[str] = []

    def fake_input(prompt: str) -> str:
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return fake_input, prompts


def run_script(*answers: str) -> tuple[int, str, list[str]]:
    output: list[str] = []
    fake_input, prompts = scripted(*answers)
    code = run(fake_input, output.append)
    return code, "\n".join(output), prompts


def test_perfect_game_on_console():
    code, output, prompts = run_script(*["10"] * 12)
    assert code == 0
    assert output.startswith("Happy Bowling!")
    assert output.count("Strike!") == 9
    assert "Game Over! Your total score is: 300" in output
    assert prompts[-1] == "Enter pins knocked down in third roll: "


def test_spare_announced_and_invalid_input_reprompts():
    code, output, prompts = run_script("4", "7", "abc", "6", *["0"] * 18)
    assert code == 0
    assert "Please enter a number between 0 and 6" in output
    assert "Please enter a valid integer" in output
    assert "Spare!" in output
    assert "Game Over! Your total score is: 10" in output
    assert prompts[:4] == [
        "Enter pins knocked down in first roll: ",
        "Enter pins knocked down in second roll: ",
        "Enter pins knocked down in second roll: ",
        "Enter pins knocked down in second roll: ",
    ]


def test_display_command_renders_score():
    code, output, _ = run_script("3", "4", "d", "q")
    assert code == 0
    assert "=== Current Score ===" in output
    assert "  Running Total: 7" in output
    assert output.endswith("Game Terminated.")


def test_end_of_input_terminates_game():
    code, output, _ = run_script("10")
    assert code == 0
    assert "Game Over" not in output
    assert output.endswith("Game Terminated.")


def test_tenth_frame_prompts_for_bonus_after_strike():
    code, output, prompts = run_script(*["0"] * 18, "10", "7", "2")
    assert code == 0
    assert prompts[-1] == "Enter pins knocked down in third roll: "
    assert "Game Over! Your total score is: 19" in output
