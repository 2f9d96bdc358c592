"""Plural rules example for tarjama.

A plural template lists ``{rule} message`` segments separated by single
pipes; the last segment is the default. The count selects the first
matching segment.

Python 3.13+.
"""

from tarjama import Catalogue, CatalogueBag, Locale, Translator

APPLE = (
    "{0} There are no apples | {1} There is one apple | "
    "{2..4} There are few apples | There are {?} apples"
)

bag = CatalogueBag([Catalogue(Locale("en"), {"messages": {"apple": APPLE}})])
translator = Translator(bag)

for count in [0, 1, 4, 10]:
    print(translator.trans("en", "messages", "apple", count))
# Output:
# There are no apples
# There is one apple
# There are few apples
# There are 10 apples
