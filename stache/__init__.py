"""Stache: sort home-directory dotfiles into a managed set."""

__version__ = "0.3.0"
