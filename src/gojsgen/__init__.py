"""Scaffold TYPO3 extensions that ship a JavaScript library."""
