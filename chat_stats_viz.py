"""Render charts from the CSV files written by chat_stats_summary.py."""

from __future__ import annotations

import argparse
import os

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns


def load_daily_frame(path: str) -> pd.DataFrame:
    """Read daily_stats.csv, fill missing days with zero and add averages."""
    df = pd.read_csv(path)
    if df.empty:
        return df
    df['date'] = pd.to_datetime(df['date'])
    df = df.sort_values('date').set_index('date')

    # Calendar days with no messages are absent from the CSV
    full_range = pd.date_range(df.index.min(), df.index.max(), freq='D')
    df = df.reindex(full_range, fill_value=0)
    df.index.name = 'date'

    df['messages_7_day_avg'] = df['total_messages'].rolling(window=7, min_periods=1).mean()
    df['messages_28_day_avg'] = df['total_messages'].rolling(window=28, min_periods=1).mean()
    df['cumulative_avg_messages'] = df['total_messages'].expanding().mean()
    return df.reset_index()


def plot_daily_messages(df: pd.DataFrame, output_path: str) -> None:
    plt.figure(figsize=(15, 8))
    plt.bar(df['date'], df['total_messages'], alpha=0.5, color='lightcoral', label='Daily Messages')
    plt.plot(df['date'], df['messages_7_day_avg'], color='red', linewidth=2, label='7-day Average')
    plt.plot(df['date'], df['messages_28_day_avg'], color='blue', linewidth=2, label='28-day Average')
    plt.plot(df['date'], df['cumulative_avg_messages'], color='purple', linewidth=2, label='Lifetime Average to Date')
    plt.title('Daily Messages with Rolling Averages', fontsize=14, pad=20)
    plt.xlabel('Date', fontsize=12)
    plt.ylabel('Number of Messages', fontsize=12)
    plt.grid(True, alpha=0.3)
    plt.legend()
    plt.xticks(rotation=45)
    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close()


def plot_hourly_messages(df: pd.DataFrame, output_path: str) -> None:
    plt.figure(figsize=(12, 6))
    sns.barplot(data=df, x='hour', y='total_messages', color='skyblue')
    plt.title('Message Distribution by Hour', fontsize=14, pad=20)
    plt.xlabel('Hour of Day', fontsize=12)
    plt.ylabel('Number of Messages', fontsize=12)
    plt.grid(True, axis='y', alpha=0.3)
    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close()


def plot_top_users(df: pd.DataFrame, output_path: str, limit: int = 10) -> None:
    top = df.sort_values('messages', ascending=False).head(limit)
    plt.figure(figsize=(12, 6))
    sns.barplot(data=top, x='messages', y='user', color='lightgreen')
    plt.title(f'Top {limit} Most Active Users', fontsize=14, pad=20)
    plt.xlabel('Messages', fontsize=12)
    plt.ylabel('')
    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close()


def render_all(analytics_dir: str = 'chat_analytics') -> list[str]:
    """Render every chart whose source CSV exists; return the written paths."""
    written = []

    daily_csv = os.path.join(analytics_dir, 'daily_stats.csv')
    if os.path.exists(daily_csv):
        daily = load_daily_frame(daily_csv)
        if not daily.empty:
            out = os.path.join(analytics_dir, 'daily_messages.png')
            plot_daily_messages(daily, out)
            written.append(out)

    hourly_csv = os.path.join(analytics_dir, 'hourly_stats.csv')
    if os.path.exists(hourly_csv):
        out = os.path.join(analytics_dir, 'hourly_messages.png')
        plot_hourly_messages(pd.read_csv(hourly_csv), out)
        written.append(out)

    users_csv = os.path.join(analytics_dir, 'user_stats.csv')
    if os.path.exists(users_csv):
        users = pd.read_csv(users_csv)
        if not users.empty:
            out = os.path.join(analytics_dir, 'top_users.png')
            plot_top_users(users, out)
            written.append(out)

    return written


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description='Render charts from chat analytics CSV files')
    parser.add_argument('analytics_dir', nargs='?', default='chat_analytics',
                        help='Directory written by chat_stats_summary.py (default: chat_analytics)')
    args = parser.parse_args(argv)

    written = render_all(args.analytics_dir)
    if written:
        print("Visualizations have been saved:")
        for path in written:
            print(f"  {path}")
    else:
        print(f"No analytics CSV files found in '{args.analytics_dir}'.")


if __name__ == '__main__':
    main()
