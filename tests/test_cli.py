import pytest

from btreedemo.btree import BTree
from btreedemo.cli import (
    DELETE_VALUES,
    INSERT_VALUES,
    main,
    run_delete_demo,
    run_insert_demo,
)


def _tree_after_inserts(count):
    tree = BTree(2)
    for value in INSERT_VALUES[:count]:
        tree.insert(value)
    return tree


def test_insert_demo_starts_with_single_root():
    assert run_insert_demo().startswith("\t[10] \n")


def test_insert_demo_is_concatenation_of_each_step():
    expected = "".join(
        _tree_after_inserts(n).format() for n in range(1, len(INSERT_VALUES) + 1)
    )
    assert run_insert_demo() == expected


def test_insert_demo_final_tree_holds_all_values():
    tree = _tree_after_inserts(len(INSERT_VALUES))
    assert tree.keys() == sorted(INSERT_VALUES)
    assert run_insert_demo().endswith(tree.format())


def test_delete_demo_headers_in_order():
    lines = [
        line
        for line in run_delete_demo().splitlines()
        if line.startswith(("Inserted", "Removing"))
    ]
    expected = [f"Inserted {v}:" for v in INSERT_VALUES] + [
        f"Removing {v}:" for v in DELETE_VALUES
    ]
    assert lines == expected


def test_delete_demo_final_state():
    tree = _tree_after_inserts(len(INSERT_VALUES))
    for value in DELETE_VALUES:
        tree.remove(value)
    remaining = sorted(set(INSERT_VALUES) - set(DELETE_VALUES))
    assert tree.keys() == remaining
    assert run_delete_demo().endswith(f"Removing 17:\n{tree.format()}\n")


def test_delete_demo_first_block():
    assert run_delete_demo().startswith("Inserted 10:\n\t[10] \n\n")


def test_main_default_runs_delete_demo(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == run_delete_demo()


def test_main_insert(capsys):
    assert main(["insert"]) == 0
    assert capsys.readouterr().out == run_insert_demo()


def test_main_rejects_unknown_demo(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["bogus"])
    assert excinfo.value.code == 2