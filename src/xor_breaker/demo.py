"""Built-in sample used by the demo command."""
from xor_breaker.utils import b64_encode
from xor_breaker.xor import encrypt


DEMO_KEY = b"ICE"

SAMPLE_PLAINTEXT = b"""The lighthouse keeper woke before the sun, as he had done every morning for
thirty years. He climbed the narrow stairs with a lamp in one hand and a cup of
tea in the other, counting the steps out of habit rather than need. There were
one hundred and twelve of them, and he knew each one by the sound it made under
his boots. At the top he wiped the great lens with a soft cloth, checked the
oil, and looked out across the water to see what kind of day it would be.

The sea was calm and grey. A few gulls drifted over the rocks near the harbour,
and far out on the horizon a fishing boat was heading home with its nets pulled
in. The keeper watched it for a while and then wrote a short note in the log:
wind light from the west, visibility good, one vessel returning. He had filled
many books with notes like this one, and he kept them all on a shelf in the
kitchen, where his wife used to say they would one day be worth reading.

After breakfast he walked down to the village to buy bread and to collect the
letters that had come on the morning coach. The baker asked about the weather,
as she always did, and he told her that it would stay fair until the evening
and then turn to rain. She laughed and said that he was never wrong about the
rain, and he answered that a man who spends his life looking at the sky learns
to read it like a page of a book. On the way back he stopped at the church to
sit for a few minutes in the quiet, and then he went on along the cliff path.

In the afternoon the wind began to rise. The keeper trimmed the wicks, filled
the reservoir, and wound the clockwork that turned the light. When the first
drops of rain struck the glass he lit the lamp, and the beam swept out over the
dark water, steady and bright, to warn the ships away from the rocks. He sat by
the window with his pipe and his log book until late in the night, listening
to the storm and thinking of all the sailors who would never know his name but
who would reach the harbour safely because the light was burning.

By morning the storm had passed. The keeper put out the lamp, cleaned the soot
from the glass, and went down to the rocks to see what the sea had left behind.
There were planks and ropes and a broken oar, and among them a small wooden box
with a brass lock. He carried it up to the kitchen and set it on the table, but
he did not open it at once. Instead he made a pot of tea and sat looking at the
box, wondering which ship it had come from and whether anyone was missing it.
In the end he decided that it was not his to open, and he wrote a letter to the
harbour master describing the box and the place where he had found it.

The harbour master came out two days later in a small boat rowed by his son.
He was a large man with a loud voice, and he filled the little kitchen with his
talk of ships and cargo and the price of coal. He looked at the box for a long
time and then said that it must belong to the trading ship that had lost part of
its deck load off the point during the storm. The owners would want it back, he
said, and there might even be a reward for the man who had found it. The keeper
shook his head and said that he wanted nothing for doing what anyone would do.

That evening, when the boat had gone and the house was quiet again, the keeper
climbed the stairs to light the lamp as usual. The sky was clear and full of
stars, and the sea was so still that he could see the beam reflected on the
water all the way to the horizon. He thought about the box, and about the people
on the ship who had worried through the night, and about all the nights still to
come. Then he opened his log book and wrote in his careful hand: wind none, sea
calm, visibility excellent, all well at the station.
"""


def demo_ciphertext_b64() -> str:
    """The sample plaintext encrypted with the demo key, base64 encoded."""
    return b64_encode(encrypt(SAMPLE_PLAINTEXT, DEMO_KEY))
