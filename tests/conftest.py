"""Shared fixtures for ldsi tests."""

import pytest


def synthetic_words(n: int, prefix: str = "x") -> list[str]:
    """n distinct alphabetic words of at least two letters."""
    words = []
    for i in range(n):
        letters = ""
        rest = i
        while True:
            letters += chr(ord("a") + rest % 26)
            rest //= 26
            if rest == 0:
                break
        words.append(prefix + letters)
    return words


CHAOTIC_TEXT = (
    "Quantum toasters hum the marseillaise in inverted binary while "
    "cobalt giraffes negotiate umbrella treaties beneath fermented "
    "cathedrals; sixteen velvet algorithms devour porcelain thunder, "
    "obsidian kazoos whisper mortgage rates to hibernating glaciers, "
    "nebulous pretzels audit the carburetor of lunar bureaucracy, "
    "syncopated walruses levitate over mahogany spreadsheets, "
    "translucent accordions germinate inside cryptographic marmalade, "
    "feral chandeliers recite geothermal sonnets to bewildered "
    "pistachios, holographic mongooses bankrupt zigzagging lighthouses, "
    "epistemological sardines juggle tangerine volcanoes near "
    "bioluminescent tollbooths, and crystalline harmonicas vaporize "
    "paradoxical wheelbarrows amid somersaulting hexagonal blizzards. "
    "Meanwhile turquoise saxophones photosynthesize rhubarb asteroids, "
    "gregarious ptarmigans embezzle vermilion escalators and quixotic "
    "xylophones fossilize amber jellyfish during carnivorous eclipses."
)


@pytest.fixture(scope="session")
def chaotic_text():
    """Long, high-entropy, low-coherence text; almost every word is unique."""
    return CHAOTIC_TEXT


@pytest.fixture(scope="session")
def standard_text():
    return "Le chat dort sur le canapé."


@pytest.fixture(scope="session")
def enriched_text():
    return "Le félin somnole paisiblement sur le coussin moelleux du salon."
