"""
wordrng.engines.families.shishua

SHISHUA (Espadrine): shift, shuffle, add over four 256-bit lanes.

Design: Each mix produces a block of 16 words that is handed out one word
at a time; the 17th draw triggers the next mix. The scalar rendering keeps
every lane as four 64-bit ints so that the whole engine state, block
buffer included, lives in self._state and is zeroed by clear().
"""

from typing import Tuple

from wordrng.core.types import MASK64
from ..base import Engine64

# Fractional digits of the golden ratio, used as the initial state
PHI = (
    0x9E3779B97F4A7C15, 0xF39CC0605CEDC834, 0x1082276BF3A27251, 0xF86C6A11D0C18E95,
    0x2767F0B153D27B7F, 0x0347045B5BF1827F, 0x01886F0928403002, 0xC1D64BA40F335E36,
    0xF06AD7AE9717877E, 0x85839D6EFFBD7DC6, 0x64D325D1C5371682, 0xCADD0CCCFDFFBBE1,
    0x626E33B8D04B4331, 0xBBF73C790D94F79D, 0x471C4AB3ED3D82A5, 0xFEC507705E4AE6E5,
)

SEED_ROUNDS = 13
BLOCK_WORDS = 16

# Lane shuffle: left and right halves of the 32-bit rotation across words
SHUFFLE_LEFT = (2, 3, 0, 1, 5, 6, 7, 4)
SHUFFLE_RIGHT = (3, 0, 1, 2, 6, 7, 4, 5)

# Offsets into the flat state list
STATE = 0
OUTPUT = 16
COUNTER = 32
INDEX = 36


class Shishua(Engine64):
    """SHISHUA 64-bit, scalar form.

    State layout: 16 state words, 16 buffered output words, 4 counter
    words, and the index of the next buffered word.
    """

    name = "shishua"
    algorithm = "Shishua"
    seed_words = 4
    state_size = 37

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        s = self._state
        s[:] = [0] * self.state_size
        s[STATE:STATE + 16] = PHI
        for i in range(4):
            s[STATE + i * 2] ^= seed[i]
            s[STATE + i * 2 + 8] ^= seed[(i + 2) % 4]

        for _ in range(SEED_ROUNDS):
            self._mix()
            out = s[OUTPUT:OUTPUT + 16]
            for j in range(4):
                s[STATE + j] = out[j + 12]
                s[STATE + j + 4] = out[j + 8]
                s[STATE + j + 8] = out[j + 4]
                s[STATE + j + 12] = out[j]

        # The block from the last seeding round is served first
        s[INDEX] = 0

    def _mix(self) -> None:
        """Advance the lanes once and refill the 16-word output block."""
        s = self._state
        counter = s[COUNTER:COUNTER + 4]

        for half in range(2):
            base = STATE + half * 8
            out = OUTPUT + half * 4
            for k in range(4):
                s[base + k + 4] = (s[base + k + 4] + counter[k]) & MASK64

            t = [
                (s[base + left] >> 32) | ((s[base + right] << 32) & MASK64)
                for left, right in zip(SHUFFLE_LEFT, SHUFFLE_RIGHT)
            ]

            for k in range(4):
                u_lo = s[base + k] >> 1
                u_hi = s[base + k + 4] >> 3
                s[base + k] = (u_lo + t[k]) & MASK64
                s[base + k + 4] = (u_hi + t[k + 4]) & MASK64
                s[out + k] = u_lo ^ t[k + 4]

        for j in range(4):
            s[OUTPUT + j + 8] = s[STATE + j] ^ s[STATE + j + 12]
            s[OUTPUT + j + 12] = s[STATE + j + 8] ^ s[STATE + j + 4]
            s[COUNTER + j] = (counter[j] + 7 - 2 * j) & MASK64

    def next_word(self) -> int:
        s = self._state
        if s[INDEX] >= BLOCK_WORDS:
            self._mix()
            s[INDEX] = 0
        word = s[OUTPUT + s[INDEX]]
        s[INDEX] += 1
        return word
