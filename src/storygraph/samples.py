"""Bundled example stories."""

from __future__ import annotations

from .story import Beat, Story

__all__ = ["jurassic_park"]

_PREDATOR_RED = "#ff0000"

_RAPTORS = ["raptor1", "raptor2", "raptor3"]


def jurassic_park() -> Story:
    """The cast of Jurassic Park, following xkcd #657."""

    beats = [
        Beat.from_groups(
            [
                ["t-rex"],
                _RAPTORS,
                ["malcolm"],
                ["grant", "sattler"],
                ["gennaro"],
                ["hammond"],
                ["kids"],
                ["muldoon", "arnold", "nedry"],
            ]
        ),
        Beat.from_groups(
            [
                ["t-rex"],
                _RAPTORS,
                ["malcolm", "gennaro"],
                ["grant", "sattler", "hammond"],
                ["kids"],
                ["muldoon", "arnold", "nedry"],
            ]
        ),
        Beat.from_groups(
            [
                ["t-rex"],
                _RAPTORS,
                ["malcolm", "gennaro", "grant", "sattler", "hammond"],
                ["kids"],
                ["muldoon", "arnold", "nedry"],
            ]
        ),
        Beat.from_groups(
            [
                ["t-rex"],
                _RAPTORS,
                ["malcolm", "gennaro", "grant", "sattler", "hammond", "kids", "muldoon", "arnold", "nedry"],
            ]
        ),
        Beat.from_groups(
            [
                ["t-rex"],
                _RAPTORS,
                ["malcolm", "gennaro", "grant", "sattler", "hammond", "kids", "muldoon"],
                ["arnold", "nedry"],
            ]
        ),
        Beat.from_groups(
            [
                ["t-rex"],
                _RAPTORS,
                ["malcolm", "gennaro", "grant", "sattler", "kids"],
                ["hammond", "muldoon", "arnold"],
                ["nedry"],
            ]
        ),
        # Attack on cars
        Beat.from_groups(
            [
                ["t-rex", "malcolm", "gennaro", "grant", "kids"],
                _RAPTORS,
                ["sattler", "hammond", "muldoon", "arnold"],
                ["nedry"],
            ],
        ),
        # Must go faster / Nedry eaten
        Beat.from_groups(
            [
                ["grant", "kids"],
                ["t-rex", "malcolm", "sattler", "muldoon"],
                _RAPTORS,
                ["arnold", "hammond"],
                ["dilophosaurus", "nedry"],
            ],
        ),
        # Gallimimus
        Beat.from_groups(
            [
                ["grant", "kids", "t-rex"],
                ["raptor1", "raptor2"],
                ["raptor3"],
                ["malcolm", "sattler", "muldoon", "arnold", "hammond"],
                ["dilophosaurus"],
            ],
        ),
        # Shed
        Beat.from_groups(
            [
                ["t-rex"],
                ["grant", "kids"],
                ["raptor1", "raptor2"],
                ["raptor3", "arnold"],
                ["malcolm", "sattler", "muldoon", "hammond"],
            ],
        ),
        # Clever girl
        Beat.from_groups(
            [
                ["t-rex"],
                ["kids", "grant"],
                ["raptor1", "muldoon", "raptor2"],
                ["raptor3", "sattler"],
                ["malcolm", "hammond"],
            ],
        ),
        # Kitchen
        Beat.from_groups(
            [
                ["t-rex"],
                ["raptor1", "kids", "raptor2"],
                ["grant", "sattler"],
                ["raptor3"],
                ["malcolm", "hammond"],
            ],
        ),
        Beat.from_groups(
            [
                ["t-rex"],
                ["raptor1"],
                ["kids", "grant", "sattler"],
                ["raptor3"],
                ["malcolm", "hammond"],
            ]
        ),
        # Visitor center
        Beat.from_groups(
            [
                ["t-rex"],
                ["raptor1", "kids", "grant", "sattler", "raptor3"],
                ["malcolm", "hammond"],
            ],
        ),
        # Visitor center
        Beat.from_groups(
            [
                ["t-rex", "raptor1", "kids", "grant", "sattler", "raptor3"],
                ["malcolm", "hammond"],
            ],
        ),
        Beat.from_groups(
            [
                ["t-rex"],
                ["kids", "grant", "sattler", "malcolm", "hammond"],
            ]
        ),
    ]
    colors = {name: _PREDATOR_RED for name in ["t-rex", *_RAPTORS]}
    return Story(beats=beats, colors=colors, title="Jurassic Park")
