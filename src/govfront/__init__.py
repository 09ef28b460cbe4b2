"""govfront - browse pages for the content website."""
