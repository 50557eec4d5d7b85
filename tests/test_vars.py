from edgecon.vars import VarManager
from edgecon.solver.boolean_solver import BooleanSolver
from edgecon.reduction.variables import (
    TranslatorKey, ParentKey, LevelKey,
    is_ith_translator, parent, level_in_spanning_tree
)

def test_var_manager_deterministic():
    vm1 = VarManager()
    id1_x = vm1.declare("x")
    id1_y = vm1.declare("y")

    vm2 = VarManager()
    id2_x = vm2.declare("x")
    id2_y = vm2.declare("y")

    assert id1_x == id2_x
    assert id1_y == id2_y
    assert id1_x != id1_y
    assert vm1.declare("x") == id1_x

def test_var_manager_fresh_is_not_declared():
    vm = VarManager()
    x = vm.declare("x")
    v1 = vm.fresh("aux")
    v2 = vm.fresh("aux", namespace="ir")
    assert len({x, v1, v2}) == 3
    assert vm.is_aux(v1) and vm.is_aux(v2) and not vm.is_aux(x)
    assert vm.declared() == {"x": x}
    assert vm.max_id == 3
    # a later declaration never reuses an aux id
    assert vm.declare("y") == 4

def test_translator_variable_ignores_edge_direction():
    s = BooleanSolver()
    assert is_ith_translator(s, 2, 1, 0) == is_ith_translator(s, 1, 2, 0)
    assert is_ith_translator(s, 1, 2, 0) != is_ith_translator(s, 1, 2, 1)
    assert TranslatorKey.of(3, 1, 0) == TranslatorKey(u=1, v=3, i=0)
    assert TranslatorKey.of(3, 1, 0).name == "x_[(1,3),0]"

def test_parent_variable_is_ordered():
    s = BooleanSolver()
    assert parent(s, 1, 2) != parent(s, 2, 1)
    assert parent(s, 1, 2) == s.create_variable(ParentKey(child=1, parent=2))
    assert ParentKey(child=1, parent=2).name == "p_[1,2]"

def test_level_variable_argument_order():
    s = BooleanSolver()
    # level first, component second
    assert level_in_spanning_tree(s, 1, 2) == s.create_variable(LevelKey(component=2, level=1))
    assert level_in_spanning_tree(s, 1, 2) != level_in_spanning_tree(s, 2, 1)
    assert LevelKey(component=2, level=1).name == "l_[2,1]"

def test_families_never_alias():
    s = BooleanSolver()
    p = parent(s, 1, 2)
    l = level_in_spanning_tree(s, 2, 1)
    x = is_ith_translator(s, 1, 2, 0)
    assert len({p.var, l.var, x.var}) == 3
    assert len(s.var_manager.declared()) == 3
