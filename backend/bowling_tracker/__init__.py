"""Ten-pin bowling game recording and scoring."""
