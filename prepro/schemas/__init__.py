"""Pydantic schemas package"""
from prepro.schemas.options import TimeAgoOptions, TimeFromNowOptions, TimeInWordsOptions


__all__ = [
    "TimeAgoOptions",
    "TimeFromNowOptions",
    "TimeInWordsOptions",
]
