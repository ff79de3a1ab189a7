"""Gymnasium environments for Block Drop."""

from __future__ import annotations

from gymnasium.envs.registration import register

# Register default Block Drop environment (20x10 visible board)
register(
    id="BlockDrop-20x10-v0",
    entry_point="block_drop.env.block_drop_env:BlockDropEnv",
)

__all__ = ["BlockDrop-20x10-v0"]
