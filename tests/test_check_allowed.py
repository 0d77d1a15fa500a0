from script.check_allowed import find_rejected


class FakeClient:
    def __init__(self, valid):
        self.valid = set(valid)
        self.asked = []

    def validate_word(self, word):
        self.asked.append(word)
        return word in self.valid


def test_find_rejected_keeps_order():
    client = FakeClient({"CRANE", "STARE"})
    words = ["CRANE", "QQQQQ", "STARE", "ZZZZZ"]
    assert find_rejected(words, client, progress=False) == ["QQQQQ", "ZZZZZ"]
    assert client.asked == words
