"""Static stopword sets keyed by index language code."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


_ENGLISH = frozenset(
    """
    a about above after again against all am an and any are as at be because
    been before being below between both but by can could did do does doing
    down during each few for from further had has have having he her here hers
    herself him himself his how i if in into is it its itself just me more most
    my myself no nor not now of off on once only or other our ours ourselves out
    over own same she should so some such than that the their theirs them
    themselves then there these they this those through to too under until up
    very was we were what when where which while who whom why will with would
    you your yours yourself yourselves
    """.split()
)

_GERMAN = frozenset(
    """
    aber alle allem allen aller alles als also am an ander andere anderem
    anderen anderer anderes auch auf aus bei bin bis bist da damit dann das
    dass dein deine dem den der des dich die dies diese diesem diesen dieser
    dieses dir doch dort du durch ein eine einem einen einer eines er es euer
    eure fur hab habe haben hat hatte hier hin hinter ich ihm ihn ihnen ihr
    ihre im in ist ja jede jedem jeden jeder jedes kein keine mich mir mit
    muss nach nicht nichts noch nun nur ob oder ohne sehr sein seine sich sie
    sind so soll sondern um und uns unser unter viel vom von vor war waren
    was weil wenn wer wie wir wird wo zu zum zur uber
    """.split()
)

_FRENCH = frozenset(
    """
    a au aux avec ce ces dans de des du elle en et eux il ils je la le les
    leur lui ma mais me meme mes moi mon ne nos notre nous on ou par pas pour
    qu que qui sa se ses son sur ta te tes toi ton tu un une vos votre vous
    c d j l m n s t y ete etre avoir est sont
    """.split()
)

_SPANISH = frozenset(
    """
    a al algo algunas algunos ante antes como con contra cual cuando de del
    desde donde durante e el ella ellas ellos en entre era es esa esas ese eso
    esos esta estas este esto estos fue ha hay la las le les lo los mas me mi
    mis mucho muy ni no nos o otra otros para pero poco por porque que quien
    se sea ser si sin sobre su sus tambien te tiene todo tu un una uno unos y
    ya yo
    """.split()
)

_ITALIAN = frozenset(
    """
    a ad al alla alle agli ai anche che chi ci come con contro da dal dalla
    dei del della delle dello di e ed gli ha hanno i il in io la le lei lo
    loro lui ma mi ne nel nella noi non o per piu quale quello questa questo
    se si sono su sua sue suo sul sulla tra tu un una uno vi voi
    """.split()
)

_DUTCH = frozenset(
    """
    aan al als bij dan dat de der deze die dit doch door dus een en er ge
    geen had heb hebben heeft het hier hij hoe hun ik in is ja je kan kon
    maar me met mij na naar niet nog nu of om omdat ook op over te tegen toen
    tot u uit van veel voor want was wat we wel werd wie wij wil worden zal
    ze zich zij zijn zo zonder zou
    """.split()
)

# Words are stored accent-folded and lowercase, the form the index text has
# when stopwords are removed.
STOPWORDS: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "en": _ENGLISH,
        "de": _GERMAN,
        "fr": _FRENCH,
        "es": _SPANISH,
        "it": _ITALIAN,
        "nl": _DUTCH,
    }
)
