"""English letter-frequency model.

The table holds ``log(freq)`` for each letter ``a`` through ``z``, where
*freq* is the letter's relative frequency in English text expressed as a
percentage (https://en.wikipedia.org/wiki/Letter_frequency).  Common
letters are positive, rare letters (j, q, x, z) are negative.
"""

#: Indexed by letter offset, ``"a"`` is 0.
LETTER_LOGPROB: tuple[float, ...] = (
    2.1001016443761387,  # a
    0.40011750178156913,  # b
    1.023170093501251,  # c
    1.4476246162714965,  # d
    2.5417594613807832,  # e
    0.8011043220650377,  # f
    0.7006191953986464,  # g
    1.8073046805635173,  # h
    1.9410411719438094,  # i
    -1.8773173575897015,  # j
    -0.25877072895736086,  # k
    1.3925249108705269,  # l
    0.8779656175524871,  # m
    1.9093943457612694,  # n
    2.015835918590865,  # o
    0.6570017339235921,  # p
    -2.353878387381596,  # q
    1.789590451943215,  # r
    1.8448261901647471,  # s
    2.203427521460827,  # t
    1.01450577937111,  # u
    -0.022245608947319737,  # v
    0.8586616190375187,  # w
    -1.8971199848858813,  # x
    0.6800619410112898,  # y
    -2.6036901857779675,  # z
)

_ORD_A = ord("a")

#: Character -> log-probability for both cases of every ASCII letter.
#: Characters missing from the map contribute nothing to a score.
LETTER_WEIGHTS: dict[str, float] = {
    **{chr(_ORD_A + i): lp for i, lp in enumerate(LETTER_LOGPROB)},
    **{chr(_ORD_A + i).upper(): lp for i, lp in enumerate(LETTER_LOGPROB)},
}
