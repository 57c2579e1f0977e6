"""
UIメッセージ国際化モジュール。

OSのロケールに基づいて日本語/英語のUIメッセージを自動切替する。
"""
import locale
import os
import sys

MESSAGES: dict[str, dict[str, str]] = {
    "ja": {
        # ツールタイトル
        "tool_title": "縦書き組版補正ツール（縦中横・文字の向き）",

        # 言語選択
        "select_language": "言語を選択してください / Select language:",
        "opt_lang_ja": "日本語",
        "opt_lang_en": "English",

        # 変換設定
        "tcy_digit_prompt": "縦中横にする数字の最大桁数（0で無効、デフォルト: {d}）: ",
        "invalid_tcy_digit": "無効な桁数です。0以上の整数を入力してください。デフォルト値({d})を使用します。",
        "orientation_question": "記号・ギリシャ文字・キリル文字の向きを自動調整しますか？",
        "verbose_question": "詳細ログ（デバッグ出力）を表示しますか？",
        "css_question": "縦中横・文字の向き用のCSSファイル（{name}）を出力しますか？",
        "opt_yes": "はい",
        "opt_no": "いいえ",

        # 処理モード選択
        "select_processing_mode": "処理モードを選択してください:",
        "opt_single": "単一のHTML/XHTMLファイルを変換",
        "opt_folder": "フォルダ内の複数HTML/XHTMLファイルを変換",

        # 共通選択UI
        "choice_prompt": "選択 (1-{n}, デフォルト: {d}): ",
        "invalid_value": "無効な値です。1-{n}の範囲で入力してください。デフォルト値({d})を使用します。",
        "invalid_input": "無効な入力です。数値を入力してください。デフォルト値({d})を使用します。",

        # パス入力
        "prompt_folder_path": "HTML/XHTMLファイルが格納されたフォルダのパスを指定してください\n",
        "prompt_file_path": "HTML/XHTMLファイル（{ext}）のパスを指定してください\n",

        # 処理ログ
        "processing_start": "処理開始: {time}",
        "processing_end": "処理終了: {time}",
        "elapsed_time": "所要時間: {time}",
        "output_file": "生成ファイル: {path}",
        "css_saved": "CSSファイルを出力しました: {path}",
        "processing_file": "処理中: {name}",
        "file_count": "{count} 個のファイルを処理します。",
        "processing_aborted": "処理を中断しました。",
        "config_summary": "設定: 縦中横桁数={tcy_digit}, 向き自動調整={orientation}",

        # エラー・バリデーション
        "unsupported_suffix": "対応していない拡張子です: {name}（対応: {ext}）",
        "no_files_in_folder": "{folder} に{ext}ファイルが見つかりません。",

        # ロガープレフィックス
        "log_warning": "警告: {message}",
        "log_success": "成功: {message}",
        "log_progress": "処理中: {message} {current}/{total}",

        # 例外メッセージ
        "exception_file_not_found": "{file_type}が見つかりません: {file_path}",
        "exception_invalid_config": "設定値が不正です: {field}={value}",
        "exception_malformed_markup": "マークアップが閉じられていないタグで終わっています: {tail}",

        # ファイル種別名（FileNotFoundError_ の file_type 引数用）
        "file_type_input_html": "入力HTMLファイル",
        "file_type_input_folder": "入力フォルダ",

        # 変換エンジンのデバッグログ
        "debug_input": "[TCY Debug] 入力: {html}",
        "debug_options": "[TCY Debug] オプション: tcy_digit={tcy_digit}, auto_text_orientation={orientation}",
        "debug_mode_document": "[TCY Debug] HTML文書として処理します",
        "debug_mode_fragment": "[TCY Debug] テキスト（断片）として処理します",
        "debug_result": "[TCY Debug] 変換結果: {html}",
        "debug_fallback_malformed": "[TCY Debug] マークアップが不正なため入力をそのまま返します: {error}",
        "debug_fallback_no_body": "[TCY Debug] body要素・html要素が得られないため入力をそのまま返します",
        "debug_skip_node": "[TCY Debug] 除外ノードをスキップ: {node}",
        "debug_text_node": "[TCY Debug] テキストノードを処理: {text}",
        "debug_tag_node": "[TCY Debug] タグを処理: {name}",
        "debug_transformed": "[TCY Debug] 変換後テキスト: {text}",
        "debug_reference_found": "[TCY Debug] 文字参照を検出: {match}",
        "debug_link_found": "[TCY Debug] URL・メールアドレスを検出: {match}",
        "debug_tcy_disabled": "[TCY Debug] tcy_digit が 0 のため数字の変換をスキップします",
        "debug_number": "[TCY Debug] 数字を変換: {digits}",
        "debug_emphasis_marks": "[TCY Debug] 感嘆符・疑問符を変換: {marks}",
        "debug_orientation": "[TCY Debug] 文字の向きを調整: {char} ({css_class})",
    },
    "en": {
        # Tool title
        "tool_title": "Tategaki Typesetting Corrector (tate-chu-yoko & orientation)",

        # Language selection
        "select_language": "言語を選択してください / Select language:",
        "opt_lang_ja": "日本語",
        "opt_lang_en": "English",

        # Transformation settings
        "tcy_digit_prompt": "Maximum digit-run length for tate-chu-yoko (0 disables, default: {d}): ",
        "invalid_tcy_digit": "Invalid length. Enter an integer of 0 or more. Using default ({d}).",
        "orientation_question": "Automatically adjust the orientation of symbols and Greek/Cyrillic letters?",
        "verbose_question": "Show verbose (debug) log output?",
        "css_question": "Write the CSS file for tate-chu-yoko and orientation ({name})?",
        "opt_yes": "Yes",
        "opt_no": "No",

        # Processing mode selection
        "select_processing_mode": "Select processing mode:",
        "opt_single": "Transform a single HTML/XHTML file",
        "opt_folder": "Transform multiple HTML/XHTML files in a folder",

        # Common selection UI
        "choice_prompt": "Selection (1-{n}, default: {d}): ",
        "invalid_value": "Invalid value. Enter a number between 1-{n}. Using default ({d}).",
        "invalid_input": "Invalid input. Enter a number. Using default ({d}).",

        # Path input
        "prompt_folder_path": "Specify the path to the folder containing HTML/XHTML files\n",
        "prompt_file_path": "Specify the path to the HTML/XHTML file ({ext})\n",

        # Processing log
        "processing_start": "Processing started: {time}",
        "processing_end": "Processing finished: {time}",
        "elapsed_time": "Elapsed time: {time}",
        "output_file": "Output file: {path}",
        "css_saved": "CSS file written: {path}",
        "processing_file": "Processing: {name}",
        "file_count": "Processing {count} file(s).",
        "processing_aborted": "Processing aborted.",
        "config_summary": "Settings: tcy digits={tcy_digit}, auto orientation={orientation}",

        # Errors and validation
        "unsupported_suffix": "Unsupported file extension: {name} (supported: {ext})",
        "no_files_in_folder": "No {ext} files found in {folder}.",

        # Logger prefixes
        "log_warning": "Warning: {message}",
        "log_success": "Success: {message}",
        "log_progress": "Processing: {message} {current}/{total}",

        # Exception messages
        "exception_file_not_found": "{file_type} not found: {file_path}",
        "exception_invalid_config": "Invalid setting: {field}={value}",
        "exception_malformed_markup": "Markup ends inside an unterminated tag: {tail}",

        # File type names (for FileNotFoundError_ file_type argument)
        "file_type_input_html": "Input HTML file",
        "file_type_input_folder": "Input folder",

        # Engine debug log
        "debug_input": "[TCY Debug] Input: {html}",
        "debug_options": "[TCY Debug] Options: tcy_digit={tcy_digit}, auto_text_orientation={orientation}",
        "debug_mode_document": "[TCY Debug] Processing HTML content",
        "debug_mode_fragment": "[TCY Debug] Processing plain text content",
        "debug_result": "[TCY Debug] Result: {html}",
        "debug_fallback_malformed": "[TCY Debug] Malformed markup, returning input unchanged: {error}",
        "debug_fallback_no_body": "[TCY Debug] No body or html element, returning input unchanged",
        "debug_skip_node": "[TCY Debug] Skipping element: {node}",
        "debug_text_node": "[TCY Debug] Processing text node: {text}",
        "debug_tag_node": "[TCY Debug] Processing tag: {name}",
        "debug_transformed": "[TCY Debug] Transformed text: {text}",
        "debug_reference_found": "[TCY Debug] Found character reference: {match}",
        "debug_link_found": "[TCY Debug] Found URL or email: {match}",
        "debug_tcy_disabled": "[TCY Debug] tcy_digit is 0, skipping number conversion",
        "debug_number": "[TCY Debug] Converting number: {digits}",
        "debug_emphasis_marks": "[TCY Debug] Converting emotion marks: {marks}",
        "debug_orientation": "[TCY Debug] Adjusting orientation: {char} ({css_class})",
    },
}

# OS言語判定
def _detect_ui_language() -> str:
    """OSのロケールから UI 言語を判定する。"""
    # macOS: システム言語設定（AppleLanguages）を最優先
    # LANG=C.UTF-8 等はシステム言語と無関係なため、macOS設定を先にチェック
    if sys.platform == "darwin":
        try:
            import subprocess
            result = subprocess.run(
                ["defaults", "read", "-g", "AppleLanguages"],
                capture_output=True, text=True, timeout=2
            )
            if result.returncode == 0:
                # 出力例: ("ja-JP", "en-US", ...) → 先頭の言語コードを取得
                for line in result.stdout.splitlines():
                    line = line.strip().strip('",() ')
                    if line:
                        return "ja" if line.startswith("ja") else "en"
        except Exception:
            pass
    # 環境変数をチェック（LC_ALL, LC_MESSAGES, LANG）
    # C / C.UTF-8 / POSIX はデフォルト値のため言語指定なしとして除外
    for env_var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(env_var, "")
        if value and not value.startswith("C") and value != "POSIX":
            return "ja" if value.startswith("ja") else "en"
    # フォールバック: locale.getlocale()
    # Windows では "Japanese_Japan" のように返るため、大文字小文字を無視して判定
    try:
        loc = locale.getlocale()[0] or ""
    except ValueError:
        loc = ""
    return "ja" if loc.lower().startswith("ja") else "en"

_ui_lang = _detect_ui_language()


def set_ui_language(lang_code: str) -> None:
    """
    UIメッセージ言語を手動で設定する。

    言語選択UIでユーザーが選択した言語に合わせて呼び出す。

    Parameters
    ----------
    lang_code : str
        言語コード（例: "ja", "ja_JP", "en_US"）。
        "ja" で始まる場合は日本語、それ以外は英語を使用する。
    """
    global _ui_lang
    _ui_lang = "ja" if lang_code.startswith("ja") else "en"


def get_ui_language() -> str:
    """現在のUIメッセージ言語（"ja" または "en"）を返す。"""
    return _ui_lang


def msg(key: str, **kwargs) -> str:
    """
    指定キーのUIメッセージを現在のロケールに応じて返す。

    Parameters
    ----------
    key : str
        メッセージキー
    **kwargs
        メッセージ内のプレースホルダーに渡す値

    Returns
    -------
    str
        ロケールに応じたメッセージ文字列
    """
    template = MESSAGES[_ui_lang].get(key, key)
    if kwargs:
        return template.format(**kwargs)
    return template
