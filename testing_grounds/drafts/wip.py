"""Work in progress; excluded by the project config."""

NAME = "wip"
