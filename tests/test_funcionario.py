import json

import pytest

from crudempresa.funcionario import (
    Funcionario,
    funcionario_ids,
    funcionario_table,
    list_funcionarios,
    load_funcionarios,
)
from crudempresa.storage import (
    CrudError,
    DuplicateIdError,
    InvalidReferenceError,
    MissingFieldsError,
    NotFoundError,
)


def alice():
    return Funcionario(
        id="A",
        nome="Alice",
        cpf="123.456.789-00",
        cep="12345-678",
        salario="5000.00",
        data_nascimento="1990-01-01",
        sexo="Feminino",
        departamento_id=1,
    )


def bob():
    return Funcionario(
        id="B",
        nome="Bob",
        cpf="987.654.321-00",
        cep="87654-321",
        salario="6000.00",
        data_nascimento="1985-05-05",
        sexo="Masculino",
        departamento_id=2,
    )


def test_save_and_load(tmp_path):
    message = alice().save([1, 2], tmp_path)
    assert "salvo com sucesso" in message
    assert load_funcionarios(tmp_path) == [alice()]


def test_unknown_department_raises(tmp_path):
    with pytest.raises(InvalidReferenceError, match="DepartamentoID 1 não encontrado"):
        alice().save([2, 3], tmp_path)
    assert load_funcionarios(tmp_path) == []


def test_missing_fields_allowed_for_first_employee(tmp_path):
    sparse = Funcionario(id="X", departamento_id=1)
    sparse.save([1], tmp_path)
    assert load_funcionarios(tmp_path) == [sparse]


def test_missing_fields_rejected_when_employees_exist(tmp_path):
    alice().save([1], tmp_path)
    with pytest.raises(MissingFieldsError, match="todos os campos devem ser preenchidos"):
        Funcionario(id="X", nome="Xavier", departamento_id=1).save([1], tmp_path)


def test_duplicate_id_raises(tmp_path):
    alice().save([1, 2], tmp_path)
    clone = bob()
    clone.id = "A"
    with pytest.raises(DuplicateIdError, match="já existe um funcionário com o ID A"):
        clone.save([1, 2], tmp_path)


def test_duplicate_cpf_raises(tmp_path):
    alice().save([1, 2], tmp_path)
    clone = bob()
    clone.cpf = alice().cpf
    with pytest.raises(DuplicateIdError, match="CPF 123.456.789-00"):
        clone.save([1, 2], tmp_path)


def test_update(tmp_path):
    alice().save([1], tmp_path)
    changed = alice()
    changed.salario = "7000.00"
    message = changed.update(tmp_path)
    assert "atualizado com sucesso" in message
    assert load_funcionarios(tmp_path) == [changed]


def test_update_missing_raises(tmp_path):
    with pytest.raises(NotFoundError, match="não encontrado para atualização"):
        bob().update(tmp_path)


def test_delete(tmp_path):
    alice().save([1, 2], tmp_path)
    bob().save([1, 2], tmp_path)
    message = Funcionario(id="A").delete(tmp_path)
    assert "deletado com sucesso" in message
    assert funcionario_ids(tmp_path) == ["B"]


def test_delete_missing_raises(tmp_path):
    with pytest.raises(NotFoundError, match="não encontrado para exclusão"):
        Funcionario(id="Z").delete(tmp_path)


def test_dict_round_trip():
    original = bob()
    assert Funcionario.from_dict(original.to_dict()) == original
    assert set(original.to_dict()) == {
        "id",
        "nome",
        "cpf",
        "cep",
        "salario",
        "data_nascimento",
        "sexo",
        "departamento_id",
    }


def test_txt_line_contains_fields():
    line = alice().txt_line()
    assert line.startswith("ID: A, Nome: Alice, CPF: 123.456.789-00")
    assert line.endswith("DepartamentoID: 1")
    assert "Salário: 5000.00" in line


def test_files_mirror_each_other(tmp_path):
    alice().save([1, 2], tmp_path)
    bob().save([1, 2], tmp_path)
    table = funcionario_table(tmp_path)
    stored = load_funcionarios(tmp_path)
    assert table.txt_path.read_text(encoding="utf-8").splitlines() == [f.txt_line() for f in stored]
    assert json.loads(table.json_path.read_text(encoding="utf-8")) == [f.to_dict() for f in stored]


def test_ids_on_corrupt_file_are_empty(tmp_path):
    table = funcionario_table(tmp_path)
    table.json_path.parent.mkdir(parents=True)
    table.json_path.write_text("[{", encoding="utf-8")
    assert funcionario_ids(tmp_path) == []
    with pytest.raises(CrudError):
        load_funcionarios(tmp_path)


def test_list_prints_and_returns(tmp_path, capsys):
    alice().save([1], tmp_path)
    result = list_funcionarios(tmp_path)
    out = capsys.readouterr().out
    assert result == [alice()]
    assert "Lista de funcionários:" in out
    assert alice().txt_line() in out