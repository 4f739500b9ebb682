import pytest

from crudempresa.projeto import (
    Projeto,
    list_projetos,
    load_projetos,
    projeto_table,
)
from crudempresa.storage import (
    CrudError,
    DuplicateIdError,
    InvalidReferenceError,
    NotFoundError,
)


def _alpha():
    return Projeto(1, "Projeto Alpha", "São Paulo", 10, "D")


def test_save_and_load(tmp_path):
    projeto = _alpha()
    assert projeto.save([10, 20], ["D", "E"], tmp_path) == "Projeto com ID 1 salvo com sucesso."
    assert load_projetos(tmp_path) == [projeto]


def test_txt_mirror(tmp_path):
    _alpha().save([10], ["D"], tmp_path)
    text = (tmp_path / "txt" / "projetos.txt").read_text(encoding="utf-8")
    assert text == (
        "ID: 1, Nome: Projeto Alpha, Local: São Paulo, DepartamentoID: 10, FuncionariosProjetosID: D\n"
    )


def test_json_keeps_non_ascii(tmp_path):
    _alpha().save([10], ["D"], tmp_path)
    raw = (tmp_path / "json" / "projetos.json").read_text(encoding="utf-8")
    assert "São Paulo" in raw


def test_duplicate_id(tmp_path):
    _alpha().save([10], ["D"], tmp_path)
    with pytest.raises(DuplicateIdError) as info:
        Projeto(1, "Outro", "Rio", 10, "D").save([10], ["D"], tmp_path)
    assert str(info.value) == "Erro: já existe um projeto com o ID 1. Ação não realizada."


def test_unknown_departamento(tmp_path):
    with pytest.raises(InvalidReferenceError) as info:
        _alpha().save([20], ["D"], tmp_path)
    assert str(info.value) == "Erro: DepartamentoID 10 não encontrado. Ação não realizada."
    assert load_projetos(tmp_path) == []


def test_unknown_funcionario(tmp_path):
    with pytest.raises(InvalidReferenceError) as info:
        _alpha().save([10], ["A", "B"], tmp_path)
    assert str(info.value) == "Erro: FuncionarioID D não encontrado. Ação não realizada."
    assert load_projetos(tmp_path) == []


def test_update(tmp_path):
    Projeto(2, "Projeto Beta", "Rio de Janeiro", 20, "E").save([20], ["E"], tmp_path)
    updated = Projeto(2, "Projeto Beta Atualizado", "Curitiba", 25, "G")
    assert updated.update(tmp_path) == "Projeto com ID 2 atualizado com sucesso."
    assert load_projetos(tmp_path) == [updated]


def test_update_not_found(tmp_path):
    with pytest.raises(NotFoundError) as info:
        Projeto(5).update(tmp_path)
    assert "para atualização" in str(info.value)


def test_delete(tmp_path):
    _alpha().save([10, 30], ["D", "F"], tmp_path)
    Projeto(3, "Projeto Gamma", "Belo Horizonte", 30, "F").save([10, 30], ["D", "F"], tmp_path)
    assert Projeto(3).delete(tmp_path) == "Projeto com ID 3 deletado com sucesso."
    assert projeto_table(tmp_path).ids() == [1]


def test_delete_not_found(tmp_path):
    with pytest.raises(NotFoundError) as info:
        Projeto(8).delete(tmp_path)
    assert "para exclusão" in str(info.value)


def test_dict_round_trip():
    projeto = _alpha()
    data = projeto.to_dict()
    assert set(data) == {"id", "nome", "local", "departamento_id", "funcionarios_projetos_id"}
    assert Projeto.from_dict(data) == projeto


def test_list_projetos(tmp_path, capsys):
    _alpha().save([10], ["D"], tmp_path)
    capsys.readouterr()
    assert list_projetos(tmp_path) == [_alpha()]
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Lista de projetos:"
    assert lines[1] == _alpha().txt_line()


def test_bad_file(tmp_path, capsys):
    (tmp_path / "json").mkdir()
    (tmp_path / "json" / "projetos.json").write_text("{}", encoding="utf-8")
    with pytest.raises(CrudError):
        load_projetos(tmp_path)
    assert list_projetos(tmp_path) == []
    assert "Erro ao carregar projetos" in capsys.readouterr().out