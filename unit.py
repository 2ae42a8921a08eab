from __future__ import annotations
from board.hex import HexCoordinate, ORIGIN

class Unit:
	"""A piece on the board. Only units tagged movable follow move orders."""
	def __init__(self, name: str, position: HexCoordinate = ORIGIN, player: bool = True, movable: bool = True):
		self.name = name
		self.position = position
		self.player = player    # drawn and controlled by the player
		self.movable = movable  # position may be overwritten by a move order
		self.has_moved = False

	def __repr__(self):
		return f"{self.name}{self.position}"

	def move(self, target: HexCoordinate):
		self.position = target
		self.has_moved = True

	def status(self) -> str:
		"""Descriptive status of the unit."""
		tags = []
		if self.player:
			tags.append("player")
		if self.movable:
			tags.append("movable")
		tag_str = ", ".join(tags) if tags else "fixed"
		return f"{self.name} at {self.position} ({tag_str})"
