"""Sample texts shared by the tests."""

# Eight sentences of 75-80 characters, 628 characters in total.
STORY_SENTENCES = [
    "The morning fog rolled over the harbor while the fishermen readied their nets.",
    "Nobody spoke much at that hour, and the gulls did most of the talking for them.",
    "Old Tomas checked the weather twice, then once more, before he untied the rope.",
    "His daughter had taken the early bus to the city and would not be back for days.",
    "He missed her already, though he would never have said so out loud to anyone.",
    "The boat slid away from the pier and the village shrank into a grey outline.",
    "By noon the sun had burned through and the sea turned a deep, patient blue.",
    "He cast the first net and waited, the way his father had taught him long ago.",
]
STORY = " ".join(STORY_SENTENCES)

# 176 characters, one item per line.
LIST_TEXT = "\n".join([
    "- Drink a glass of water first thing",
    "- Write down three priorities for the day",
    "- Block one hour for focused work",
    "- Take a short walk after lunch",
    "- Close the laptop at six sharp",
])

# 1139 characters, no punctuation at all.
RUN_ON = " ".join(["the tide kept rising and we kept walking along the shore"] * 20)

QUOTE = '"Success is not final, failure is not fatal."'


