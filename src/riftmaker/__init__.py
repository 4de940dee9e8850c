"""Riftmaker - static data generator for League of Legends summoner emotes.

A small Python pipeline that pulls every locale's summoner emote manifest from
CommunityDragon and merges them into a single, id-sorted summoner-emotes.json.
"""

__version__ = "0.1.0"
__author__ = "Riftmaker Team"
