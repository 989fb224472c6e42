"""Whole-snippet purpose classification.

Each category owns an ordered list of case-insensitive keywords. A category's
score is the number of its keywords found anywhere in the text. Ranking is by
descending score; equal scores keep the order of ``PURPOSE_CATEGORIES``.
"""

from __future__ import annotations

import re
from typing import Dict, List, Tuple

from .patterns import Language, resolve_language


PURPOSE_CATEGORIES: List[Tuple[str, List[str]]] = [
	("network", [r"fetch\s*\(", r"http", r"request", r"api", r"url", r"endpoint"]),
	("ui", [r"render", r"component", r"view", r"display", r"ui", r"interface", r"dom"]),
	("dataProcessing", [r"map\s*\(", r"filter\s*\(", r"reduce\s*\(", r"transform", r"convert", r"parse"]),
	("authentication", [r"auth", r"login", r"password", r"credential", r"token", r"permission"]),
	("database", [r"database", r"db\.", r"query", r"sql", r"mongo", r"store", r"save", r"repository"]),
	("testing", [r"test", r"assert", r"expect", r"mock", r"spec"]),
	("algorithm", [r"algorithm", r"sort", r"search", r"calculate", r"compute"]),
	("fileSystem", [r"file", r"read", r"write", r"path", r"directory", r"folder"]),
]

LANGUAGE_KEYWORDS: Dict[Language, Dict[str, List[str]]] = {
	Language.JAVASCRIPT: {
		"ui": [r"react", r"angular", r"vue", r"component", r"jsx", r"tsx"],
		"network": [r"axios", r"fetch", r"xhr"],
		"database": [r"mongoose", r"sequelize", r"typeorm"],
	},
	Language.PYTHON: {
		"ui": [r"flask", r"django", r"template"],
		"network": [r"requests", r"urllib"],
		"database": [r"sqlalchemy", r"django\.db", r"cursor"],
	},
	Language.JAVA: {
		"ui": [r"swing", r"javafx", r"awt"],
		"network": [r"httpclient", r"urlconnection"],
		"database": [r"jdbc", r"repository", r"entity"],
	},
	Language.CSHARP: {
		"ui": [r"wpf", r"xaml", r"winforms"],
		"network": [r"httpclient", r"webclient"],
		"database": [r"entity\s*framework", r"dbcontext"],
	},
}

SECONDARY_PHRASES: Dict[str, str] = {
	"ui": "user interface presentation",
	"network": "network communication",
	"dataProcessing": "data processing and transformation",
	"database": "database interaction",
	"authentication": "authentication and security",
	"testing": "testing and validation",
	"algorithm": "algorithmic computation",
	"fileSystem": "file system operations",
}

GENERIC_SUMMARY = "This code appears to provide general utility functions or core logic for the application."


def keywords_for(language: str) -> List[Tuple[str, List[str]]]:
	"""Category table with the language's extra keywords appended, duplicates skipped."""
	extra = LANGUAGE_KEYWORDS.get(resolve_language(language), {})
	table: List[Tuple[str, List[str]]] = []
	for category, keywords in PURPOSE_CATEGORIES:
		merged = list(keywords)
		for keyword in extra.get(category, []):
			if keyword not in merged:
				merged.append(keyword)
		table.append((category, merged))
	return table


def matched_keywords(text: str, keywords: List[str]) -> List[str]:
	return [keyword for keyword in keywords if re.search(keyword, text, re.IGNORECASE)]


def score_categories(text: str, table: List[Tuple[str, List[str]]]) -> Dict[str, int]:
	return {category: len(matched_keywords(text, keywords)) for category, keywords in table}


def rank_categories(scores: Dict[str, int]) -> List[str]:
	# sorted() is stable, so ties keep table order
	ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
	return [category for category, score in ranked if score > 0]


def _opening(primary: str, scores: Dict[str, int], api_hit: bool) -> str:
	def seen(category: str) -> bool:
		return scores.get(category, 0) > 0

	if primary == "ui":
		if seen("network"):
			return "implement a user interface that communicates with external services."
		if seen("database"):
			return "implement a user interface that interacts with a database."
		return "implement a user interface for displaying and interacting with data."
	if primary == "network":
		if api_hit:
			return "handle network communication, likely serving as an API or service layer."
		return "handle network communication, facilitating data exchange with external systems."
	if primary == "dataProcessing":
		if seen("algorithm"):
			return "process and transform data, implementing specific algorithms for data manipulation."
		return "process and transform data, implementing business logic or data transformation."
	if primary == "database":
		if seen("dataProcessing"):
			return "interact with a database, performing data operations and transformations."
		return "interact with a database, managing data persistence and retrieval."
	if primary == "authentication":
		if seen("ui"):
			return "handle authentication and authorization, providing secure user access to the interface."
		if seen("network"):
			return "handle authentication and authorization, securing API endpoints or network resources."
		return "handle authentication and authorization, managing user credentials and permissions."
	if primary == "testing":
		if seen("ui"):
			return "implement tests for user interface components."
		if seen("network"):
			return "implement tests for network communication."
		if seen("database"):
			return "implement tests for database operations."
		return "implement tests for application functionality."
	if primary == "algorithm":
		if seen("dataProcessing"):
			return "implement specific algorithms for data processing and transformation."
		return "implement specific algorithms to solve computational problems."
	if primary == "fileSystem":
		if seen("dataProcessing"):
			return "handle file system operations, processing file data."
		return "handle file system operations, managing file reading, writing, or organization."
	return "provide utility functions or core logic for the application."


def classify_purpose(text: str, language: str) -> str:
	"""Two-sentence summary of what the snippet most likely does."""
	table = keywords_for(language)
	scores = score_categories(text, table)
	ranked = rank_categories(scores)
	if not ranked:
		return GENERIC_SUMMARY

	primary = ranked[0]
	api_hit = bool(re.search(r"api", text, re.IGNORECASE))
	summary = "This code appears to " + _opening(primary, scores, api_hit)

	if len(ranked) > 1 and scores[ranked[1]] > 1:
		summary += f" It also includes functionality for {SECONDARY_PHRASES[ranked[1]]}."
	return summary
