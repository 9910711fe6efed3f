"""
Data models for Chronicle.
"""

from .work import Work, WorkCategory, SubCategory
from .milestones import Milestone, MilestoneType, MilestoneTrack
from .tree import NodeKind, TreeNode, GroupingTree, TreePath

__all__ = [
    'Work',
    'WorkCategory',
    'SubCategory',
    'Milestone',
    'MilestoneType',
    'MilestoneTrack',
    'NodeKind',
    'TreeNode',
    'GroupingTree',
    'TreePath',
]
