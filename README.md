# quantumpoint

Building blocks for programs described as visual node graphs: the domain
model, a universal IR with a safe in-process interpreter, build-target and
sandbox rules, and project folder helpers.

## Modules

- `quantumpoint.domain`: `GraphLayer` (`CORE`, `VIEW`, `BRIDGE`) and
  `Domain` (`VIEW`, `CORE`, `BRIDGE`). `Domain.from_layer()` and
  `Domain.to_layer()` convert between them. `label()` and `subtitle()` give
  display text.
- `quantumpoint.actions`: language-agnostic domain actions as dataclasses
  (`Print`, `DataStore`, `Const`, `ListStore`, `Branch`, `While`, `For`,
  `ForEach`, `Return`, `Switch`/`SwitchArm`, `Break`, `Continue`, `Try`,
  `Throw`, `Expr`, `Async`, `Await`, `Call`, `DbRead`, `Module`), all
  subclasses of `DomainAction`. Values are plain `bool`/`int`/`float`/`str`
  literals or the structured `Ident`, `Cmp`, `BinOp`, `Logic` and `Not`,
  using the `CmpOp`, `ArithOp` and `LogicOp` enums.
- `quantumpoint.ports`: `PortSpec` with the `exec_in`, `exec_out`, `data_in`
  and `data_out` constructors, plus the standard port tuples (`PORTS_START`,
  `PORTS_IF`, `PORTS_LOOP`, `PORTS_SWITCH`, `PORTS_TRY`, `PORTS_RETURN`,
  `PORTS_DEFAULT`).
- `quantumpoint.dirty`: `DirtyTracker` records dirty node ids and a
  structure flag for incremental work. Each mark bumps a revision counter.
  `drain_dirty_nodes()` returns and forgets the dirty ids.
- `quantumpoint.target`: `BuildTarget` (`RUST`, `WASM`, `VIEW_SPEC`,
  `BRIDGE_ROUTES`) with its id, label, required domain, default and available
  targets per layer. `project_build_dir_for()` and `resolve_build_dir()`
  give `<project>/.nocode/build/<target>`.
- `quantumpoint.sandbox`: `validate_build_dir()`, `validate_profile()` and
  `validate_relative_path()`. Failures raise `BuildDirOutsideProjectError`,
  `InvalidProfileError` or `PathTraversalError`, which all derive from
  `SandboxError`.
- `quantumpoint.ir`: the universal IR. It has `Program`, `FunctionDef`, the
  `Action` kinds (the same set as the domain actions), and value
  expressions (`Ident`, `Cmp`, `Binary`, `Not`) with the `CmpOp` and `BinOp`
  enums. `format_value()` gives a structural rendering of an expression.
- `quantumpoint.runtime`: `interpret()` runs a `Program` and returns a
  `RunPreview` holding the lines it produced. The helpers `eval_value()`,
  `as_bool()`, `switch_key()`, `format_runtime_value()` and
  `mock_collection()` are public too.
- `quantumpoint.summary`: `format_program_summary()` and `action_summary()`
  give a short outline of a program's top-level actions.
- `quantumpoint.paths`: project layout and naming. It covers
  `graphs_directory()`, `build_rust_directory()`, `manifest_path()`,
  `ensure_project_directories()`, `is_project_root()`,
  `project_root_for_qp()`, `resolve_build_out()`, `user_documents_dir()`,
  `default_projects_folder()`, `resolve_project_directory()`,
  `folder_name_from_project()` and `slugify()`.

## Running a program preview

```python
from quantumpoint.ir import Print, Program
from quantumpoint.runtime import interpret

preview = interpret(Program(name="demo", actions=[Print(message="hi")]))
print(preview.lines)  # ['hi']
```

The interpreter follows these rules:

- Arithmetic works only on integers.
- `For` loops are inclusive and may count downward.
- `ForEach` and `DbRead` read built-in mock rows. There are rows for `users`
  and `orders`, and a single `row-from-<name>` row for any other name.
- `Try` catches a thrown error or an unknown variable and runs its catch
  body.

Errors surface as subclasses of `quantumpoint.runtime.InterpreterError`:
`UnknownVariable`, `UnknownFunction`, `BreakOutsideLoop`,
`ContinueOutsideLoop` and `ThrownError`.

## Validating a build location

```python
from quantumpoint.sandbox import validate_build_dir, validate_profile

validate_profile("release")
out_dir = validate_build_dir("my-project", "my-project/.nocode/build/rust")
```

`validate_build_dir()` accepts only a directory under the project's
`.nocode/build/` folder. It creates `<project>/.nocode/build/rust` and
returns that path.

## Project folders

```python
from quantumpoint.paths import folder_name_from_project, slugify

folder_name_from_project("Yangi loyiha")  # 'Yangi loyiha'
slugify("Hello World!")                   # 'hello-world'
```

## What this package does not do

The package does not do any of the following:

- It has no command-line tool.
- It does not read or write graph files or project manifests.
- It does not lower graphs into the IR.
- It does not emit source code or other build artefacts.
- It does not run any build toolchain.

It gives you the model, the interpreter, and the path and sandbox rules that
such tooling would build on.

## Tests

Install the `test` extra and run `pytest`.