"""Shared fixtures for irlens tests."""

import pytest

SAMPLE_IR = """\
; ModuleID = 'square.c'
source_filename = "square.c"
target datalayout = "e-m:e-p270:32:32-p271:32:32-p272:64:64-i64:64-f80:128-n8:16:32:64-S128"
target triple = "x86_64-pc-linux-gnu"

; Function Attrs: noinline nounwind optnone uwtable
define dso_local i32 @square(i32 noundef %0) #0 !dbg !10 {
  %2 = alloca i32, align 4
  store i32 %0, ptr %2, align 4
  call void @llvm.dbg.declare(metadata ptr %2, metadata !16, metadata !DIExpression()), !dbg !17
  %3 = load i32, ptr %2, align 4, !dbg !18
  %4 = mul nsw i32 %3, %3, !dbg !19 ; square it
  ret i32 %4, !dbg !20
}


declare void @llvm.dbg.declare(metadata, metadata, metadata) #1

!llvm.dbg.cu = !{!0}
!llvm.module.flags = !{!2, !3}
!0 = distinct !DICompileUnit(language: DW_LANG_C11, file: !1, producer: "clang version 17.0.6 (https://github.com/llvm/llvm-project)", isOptimized: false, runtimeVersion: 0, emissionKind: FullDebug, splitDebugInlining: false, nameTableKind: None)
!1 = !DIFile(filename: "square.c", directory: "/home/user/src")
!2 = !{i32 7, !"Dwarf Version", i32 5}
!3 = !{i32 2, !"Debug Info Version", i32 3}
!10 = distinct !DISubprogram(name: "square", scope: !1, file: !1, line: 3, type: !11, scopeLine: 3, flags: DIFlagPrototyped, spFlags: DISPFlagDefinition, unit: !0, retainedNodes: !15)
!16 = !DILocalVariable(name: "num", arg: 1, scope: !10, file: !1, line: 3, type: !14)
!17 = !DILocation(line: 3, column: 16, scope: !10)
!18 = !DILocation(line: 4, column: 12, scope: !10)
!19 = !DILocation(line: 4, column: 16, scope: !10)
!20 = !DILocation(line: 4, column: 5, scope: !10)
"""


@pytest.fixture
def sample_ir() -> str:
    """Clang -O0 -g output for `int square(int num) { return num * num; }`."""
    return SAMPLE_IR


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer environment overrides out of the tests."""
    monkeypatch.delenv("IRLENS_MAX_LINES", raising=False)
    monkeypatch.delenv("IRLENS_DEMANGLER", raising=False)
