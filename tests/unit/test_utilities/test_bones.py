"""Unit tests for bone hierarchy traversal."""

import pytest

from texture_toolkit.utilities import BoneNode, BoneSegment, walk_bones, bone_segments


@pytest.fixture
def arm_rig():
    """Small rig: root -> spine -> (left_arm -> left_hand, right_arm)."""
    return BoneNode.from_dict({
        'name': 'root', 'position': [0, 0, 0],
        'children': [{
            'name': 'spine', 'position': [0, 1, 0],
            'children': [
                {'name': 'left_arm', 'position': [-1, 1, 0],
                 'children': [{'name': 'left_hand', 'position': [-2, 1, 0]}]},
                {'name': 'right_arm', 'position': [1, 1, 0]},
            ],
        }],
    })


def _recursive_order(node):
    order = [node.name]
    for child in node.children:
        order.extend(_recursive_order(child))
    return order


class TestBoneWalk:
    """Test iterative traversal."""

    def test_preorder_matches_recursion(self, arm_rig):
        assert [b.name for b in walk_bones(arm_rig)] == _recursive_order(arm_rig)
        assert [b.name for b in walk_bones(arm_rig)] == [
            'root', 'spine', 'left_arm', 'left_hand', 'right_arm'
        ]

    def test_segments(self, arm_rig):
        segments = bone_segments(arm_rig)

        assert len(segments) == len(walk_bones(arm_rig)) - 1
        assert segments[0] == BoneSegment('root', 'spine', (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
        assert ('left_arm', 'left_hand') in [(s.parent, s.child) for s in segments]

    def test_single_bone_has_no_segments(self):
        assert bone_segments(BoneNode('root')) == []

    def test_deep_chain_does_not_recurse(self):
        root = BoneNode('bone_0')
        node = root
        for i in range(1, 5000):
            node = node.add_child(BoneNode(f'bone_{i}', position=(0.0, float(i), 0.0)))

        bones = walk_bones(root)
        assert len(bones) == 5000
        assert bones[-1].name == 'bone_4999'
        assert len(bone_segments(root)) == 4999
