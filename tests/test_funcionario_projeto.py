import pytest

from crudempresa.funcionario_projeto import (
    FuncionarioProjeto,
    funcionario_projeto_table,
    list_funcionarios_projetos,
    load_funcionarios_projetos,
)
from crudempresa.storage import CrudError, DuplicateIdError, NotFoundError


def test_save_and_load(tmp_path):
    relacao = FuncionarioProjeto("D", "A", 201)
    assert relacao.save(tmp_path) == "Relação funcionário-projeto com ID D salva com sucesso."
    assert load_funcionarios_projetos(tmp_path) == [relacao]


def test_save_keeps_order_and_mirrors_txt(tmp_path):
    FuncionarioProjeto("D", "A", 201).save(tmp_path)
    FuncionarioProjeto("E", "B", 202).save(tmp_path)
    assert funcionario_projeto_table(tmp_path).ids() == ["D", "E"]
    text = (tmp_path / "txt" / "funcionarios_projetos.txt").read_text(encoding="utf-8")
    assert text == "ID: D, FuncionarioID: A, ProjetoID: 201\nID: E, FuncionarioID: B, ProjetoID: 202\n"


def test_save_duplicate(tmp_path):
    FuncionarioProjeto("D", "A", 201).save(tmp_path)
    with pytest.raises(DuplicateIdError) as info:
        FuncionarioProjeto("D", "B", 202).save(tmp_path)
    assert str(info.value) == "Erro: já existe uma relação com o ID D. Ação não realizada."
    assert load_funcionarios_projetos(tmp_path) == [FuncionarioProjeto("D", "A", 201)]


def test_update(tmp_path):
    FuncionarioProjeto("E", "B", 202).save(tmp_path)
    assert FuncionarioProjeto("E", "D", 204).update(tmp_path) == (
        "Relação funcionário-projeto com ID E atualizada com sucesso."
    )
    assert load_funcionarios_projetos(tmp_path) == [FuncionarioProjeto("E", "D", 204)]


def test_update_not_found(tmp_path):
    FuncionarioProjeto("D", "A", 201).save(tmp_path)
    with pytest.raises(NotFoundError) as info:
        FuncionarioProjeto("G", "D", 204).update(tmp_path)
    assert "ID G" in str(info.value)
    assert load_funcionarios_projetos(tmp_path) == [FuncionarioProjeto("D", "A", 201)]


def test_delete(tmp_path):
    FuncionarioProjeto("D", "A", 201).save(tmp_path)
    FuncionarioProjeto("F", "C", 203).save(tmp_path)
    assert FuncionarioProjeto("F").delete(tmp_path) == (
        "Relação funcionário-projeto com ID F deletada com sucesso."
    )
    assert funcionario_projeto_table(tmp_path).ids() == ["D"]


def test_delete_not_found(tmp_path):
    with pytest.raises(NotFoundError) as info:
        FuncionarioProjeto("Z").delete(tmp_path)
    assert "para exclusão" in str(info.value)


def test_dict_round_trip():
    relacao = FuncionarioProjeto("D", "A", 201)
    assert relacao.to_dict() == {"id": "D", "funcionario_id": "A", "projeto_id": 201}
    assert FuncionarioProjeto.from_dict(relacao.to_dict()) == relacao


def test_list_prints(tmp_path, capsys):
    FuncionarioProjeto("D", "A", 201).save(tmp_path)
    capsys.readouterr()
    assert list_funcionarios_projetos(tmp_path) == [FuncionarioProjeto("D", "A", 201)]
    assert capsys.readouterr().out.splitlines() == [
        "Lista de relações funcionário-projeto:",
        "ID: D, FuncionarioID: A, ProjetoID: 201",
    ]


def test_bad_file(tmp_path, capsys):
    (tmp_path / "json").mkdir()
    (tmp_path / "json" / "funcionarios_projetos.json").write_text("nope", encoding="utf-8")
    with pytest.raises(CrudError):
        FuncionarioProjeto("D", "A", 1).save(tmp_path)
    assert list_funcionarios_projetos(tmp_path) == []
    assert "Erro ao carregar relações funcionário-projeto" in capsys.readouterr().out