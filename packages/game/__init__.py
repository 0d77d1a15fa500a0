from .session import GameSession, Commit, NUM_ROUNDS, ANSWER_LENGTH
from .records import append_result, load_results, summarize, pretty_stats

__all__ = ["GameSession", "Commit", "NUM_ROUNDS", "ANSWER_LENGTH",
           "append_result", "load_results", "summarize", "pretty_stats"]
