"""
Property and function flag bits, using the engine's own values.

Snapshots carry the raw 64-bit masks straight out of the editor, so these
must stay bit-compatible with EPropertyFlags / EFunctionFlags.
"""

from enum import IntFlag


class PropertyFlags(IntFlag):
    """Subset of EPropertyFlags (CPF_*) relevant to Blueprint variables."""

    NONE = 0
    Edit = 0x0000000000000001
    ConstParm = 0x0000000000000002
    BlueprintVisible = 0x0000000000000004
    ExportObject = 0x0000000000000008
    BlueprintReadOnly = 0x0000000000000010
    Net = 0x0000000000000020
    EditFixedSize = 0x0000000000000040
    Parm = 0x0000000000000080
    OutParm = 0x0000000000000100
    ZeroConstructor = 0x0000000000000200
    ReturnParm = 0x0000000000000400
    DisableEditOnTemplate = 0x0000000000000800
    Transient = 0x0000000000002000
    Config = 0x0000000000004000
    DisableEditOnInstance = 0x0000000000010000
    EditConst = 0x0000000000020000
    GlobalConfig = 0x0000000000040000
    InstancedReference = 0x0000000000080000
    DuplicateTransient = 0x0000000000200000
    SaveGame = 0x0000000001000000
    NoClear = 0x0000000002000000
    ReferenceParm = 0x0000000008000000
    BlueprintAssignable = 0x0000000010000000
    Deprecated = 0x0000000020000000
    IsPlainOldData = 0x0000000040000000
    RepSkip = 0x0000000080000000
    RepNotify = 0x0000000100000000
    Interp = 0x0000000200000000
    NonTransactional = 0x0000000400000000
    EditorOnly = 0x0000000800000000
    AdvancedDisplay = 0x0000040000000000
    Protected = 0x0000080000000000
    BlueprintCallable = 0x0000100000000000
    BlueprintAuthorityOnly = 0x0000200000000000
    ExposeOnSpawn = 0x0001000000000000


class FunctionFlags(IntFlag):
    """EFunctionFlags (FUNC_*)."""

    NONE = 0
    Final = 0x00000001
    RequiredAPI = 0x00000002
    BlueprintAuthorityOnly = 0x00000004
    BlueprintCosmetic = 0x00000008
    Net = 0x00000040
    NetReliable = 0x00000080
    NetRequest = 0x00000100
    Exec = 0x00000200
    Native = 0x00000400
    Event = 0x00000800
    NetResponse = 0x00001000
    Static = 0x00002000
    NetMulticast = 0x00004000
    UbergraphFunction = 0x00008000
    MulticastDelegate = 0x00010000
    Public = 0x00020000
    Private = 0x00040000
    Protected = 0x00080000
    Delegate = 0x00100000
    NetServer = 0x00200000
    HasOutParms = 0x00400000
    HasDefaults = 0x00800000
    NetClient = 0x01000000
    DLLImport = 0x02000000
    BlueprintCallable = 0x04000000
    BlueprintEvent = 0x08000000
    BlueprintPure = 0x10000000
    EditorOnly = 0x20000000
    Const = 0x40000000
    NetValidate = 0x80000000
