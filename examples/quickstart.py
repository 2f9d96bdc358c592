"""Quickstart example for tarjama.

Builds catalogues in code, then translates simple and parameterized
messages.

Python 3.13+.
"""

from tarjama import Catalogue, CatalogueBag, Context, Locale, Translator, context
from tarjama.runtime import DefaultFormatter

# Example 1: Simple and parameterized messages
print("=" * 50)
print("Example 1: Placeholders")
print("=" * 50)

bag = CatalogueBag(
    [
        Catalogue(
            Locale("en"),
            {
                "messages": {
                    "love": "I love rust!",
                    "greeting": "Hello, {name}!",
                    "inbox": "{}, you have {} new messages ({0} again).",
                    "braces": "Use {{name}} to insert a name.",
                }
            },
        ),
    ]
)
translator = Translator(bag)

print(translator.trans("en", "messages", "love"))
# Output: I love rust!

print(translator.trans("en", "messages", "greeting", context(name="Alice")))
# Output: Hello, Alice!

print(translator.trans("en", "messages", "inbox", context(user="Bob", unread=3)))
# Output: Bob, you have 3 new messages (Bob again).

print(translator.trans("en", "messages", "braces"))
# Output: Use {name} to insert a name.

# Example 2: Formatting without catalogues
print("\n" + "=" * 50)
print("Example 2: DefaultFormatter")
print("=" * 50)

formatter = DefaultFormatter()
print(formatter.format(Locale("en"), "{a} + {b} = {?}", Context((("a", 1), ("b", 1.5)), count=3)))
# Output: 1 + 1.5 = 3
