"""Generation of prototypes and chat replies through the generation API."""
