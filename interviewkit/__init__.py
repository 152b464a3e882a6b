"""Coding-interview algorithms and data structures: arrays, searching, strings,
numbers, linked lists, binary trees and specialised containers."""

__version__ = "0.1.0"
__all__ = ["nodes", "searching", "arrays", "linkedlist", "trees", "containers", "strings", "numbers"]